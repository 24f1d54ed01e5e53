"""
Module contenant les exceptions personnalisées de mkvtoolnix_utils.

Ce module suit le principe SRP en isolant la gestion des exceptions.
"""
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mkvtoolnix_utils.results.result import SyncCommandResult


class ToolnixError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ToolnixError):
    """Configuration absente, illisible ou invalide."""
    pass


class BinaryNotFoundError(ToolnixError):
    """Exécutable MKVToolNix introuvable."""
    pass


class StreamReadError(ToolnixError):
    """La lecture de la sortie du processus a échoué.

    L'erreur est mémorisée par la séquence : tout itérateur qui
    atteint ensuite la position fautive reçoit une nouvelle
    StreamReadError chaînée à la première.
    """
    pass


class ResultClosedError(ToolnixError):
    """Lecture de la sortie d'un résultat déjà fermé."""
    pass


class CommandFailedError(ToolnixError):
    """La commande a produit des erreurs ou des avertissements.

    Attributes:
        result: Résultat figé (code de sortie et sortie complète).
        message: Diagnostic court.
    """

    def __init__(
        self,
        result: "SyncCommandResult",
        message: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        """Initialise l'erreur.

        Args:
            result: Résultat figé de la commande en échec.
            message: Diagnostic court lisible.
            cause: Exception d'origine éventuelle.
        """
        super().__init__(message)
        self.result = result
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    @property
    def exit_code(self) -> int:
        """Code de sortie du processus en échec."""
        return self.result.exit_code

    @property
    def output(self):
        """Sortie classifiée complète du processus en échec."""
        return self.result.output

    def __str__(self) -> str:
        return f"{self.message}\n{self.result.render(print_command=True)}"


class MkvMergeError(CommandFailedError):
    """Échec d'une commande mkvmerge."""
    pass


class MkvPropEditError(CommandFailedError):
    """Échec d'une commande mkvpropedit."""
    pass
