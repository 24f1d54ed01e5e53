"""Module de logging."""

from mkvtoolnix_utils.logging.base import Logger
from mkvtoolnix_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
