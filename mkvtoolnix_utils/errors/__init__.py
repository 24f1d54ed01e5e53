"""Module de gestion des erreurs."""

from mkvtoolnix_utils.errors.base import ErrorHandler, ErrorHandlerChain
from mkvtoolnix_utils.errors.exceptions import (ToolnixError,
                                                ConfigurationError,
                                                BinaryNotFoundError,
                                                StreamReadError,
                                                ResultClosedError,
                                                CommandFailedError,
                                                MkvMergeError,
                                                MkvPropEditError)
from mkvtoolnix_utils.errors.console_handler import ConsoleErrorHandler
from mkvtoolnix_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ToolnixError",
    "ConfigurationError",
    "BinaryNotFoundError",
    "StreamReadError",
    "ResultClosedError",
    "CommandFailedError",
    "MkvMergeError",
    "MkvPropEditError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
]
