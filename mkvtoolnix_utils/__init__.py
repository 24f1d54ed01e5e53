"""
MKVToolNix Utils - Exécution et interprétation des outils MKVToolNix.

Modules disponibles:
- results: Sortie classifiée des processus (CachedLineSequence,
  LazyCommandResult, SyncCommandResult)
- commands: Exécution des commandes (ToolnixCommand,
  ToolnixCommandExecutor, formateurs)
- merge: Commande mkvmerge (MkvMergeCommand)
- propedit: Commande mkvpropedit (MkvPropEditCommand)
- language: Table des langues de mkvmerge (LanguageTable)
- config: Chargement de configuration (TOML, JSON, Pydantic)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
"""

__version__ = "1.0.0"

from mkvtoolnix_utils.config import (
    ToolnixConfig,
    LoggingConfig,
    FileConfigLoader,
    load_config,
)
from mkvtoolnix_utils.logging import Logger, FileLogger
from mkvtoolnix_utils.errors import (
    ToolnixError,
    ConfigurationError,
    BinaryNotFoundError,
    StreamReadError,
    ResultClosedError,
    CommandFailedError,
    MkvMergeError,
    MkvPropEditError,
)
from mkvtoolnix_utils.results import (
    Severity,
    ClassifiedLine,
    classify,
    CachedLineSequence,
    CommandResult,
    LazyCommandResult,
    SyncCommandResult,
)
from mkvtoolnix_utils.commands import (
    ToolnixBinary,
    ToolnixCommand,
    CommandExecutor,
    ToolnixCommandExecutor,
    PlainCommandFormatter,
    AnsiCommandFormatter,
)
from mkvtoolnix_utils.merge import MkvMergeCommand
from mkvtoolnix_utils.propedit import (
    MkvPropEditCommand,
    AttachmentInfo,
)
from mkvtoolnix_utils.language import (
    ToolnixLanguage,
    LanguageTable,
)

__all__ = [
    # Config
    "ToolnixConfig",
    "LoggingConfig",
    "FileConfigLoader",
    "load_config",
    # Logging
    "Logger",
    "FileLogger",
    # Errors
    "ToolnixError",
    "ConfigurationError",
    "BinaryNotFoundError",
    "StreamReadError",
    "ResultClosedError",
    "CommandFailedError",
    "MkvMergeError",
    "MkvPropEditError",
    # Résultats
    "Severity",
    "ClassifiedLine",
    "classify",
    "CachedLineSequence",
    "CommandResult",
    "LazyCommandResult",
    "SyncCommandResult",
    # Commandes
    "ToolnixBinary",
    "ToolnixCommand",
    "CommandExecutor",
    "ToolnixCommandExecutor",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    # mkvmerge / mkvpropedit
    "MkvMergeCommand",
    "MkvPropEditCommand",
    "AttachmentInfo",
    # Langues
    "ToolnixLanguage",
    "LanguageTable",
]
