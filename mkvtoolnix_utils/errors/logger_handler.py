"""
    LoggerErrorHandler
"""
from mkvtoolnix_utils.errors.base import ErrorHandler
from mkvtoolnix_utils.errors.exceptions import (CommandFailedError,
                                                ToolnixError)
from mkvtoolnix_utils.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs via le Logger injecté."""

    def __init__(self, logger: Logger) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
        """
        self.logger = logger

    def handle(self, error: Exception) -> None:
        """Log l'erreur ; la sortie d'une commande en échec est
        journalisée ligne par ligne.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, CommandFailedError):
            self.logger.log_error(
                f"{type(error).__name__}: {error.message} "
                f"(code de sortie {error.exit_code})"
            )
            for line in error.output:
                self.logger.log_error(str(line))
        elif isinstance(error, ToolnixError):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
