"""Module de configuration."""

from mkvtoolnix_utils.config.models import (
    DEFAULT_SUCCESS_CODE,
    LoggingConfig,
    ToolnixConfig,
)
from mkvtoolnix_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    load_config
)

__all__ = [
    "DEFAULT_SUCCESS_CODE",
    "LoggingConfig",
    "ToolnixConfig",
    "ConfigLoader",
    "FileConfigLoader",
    "load_config"
]
