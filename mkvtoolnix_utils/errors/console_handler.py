"""
    ConsoleErrorHandler (messages et solutions par type d'erreur)
"""
from mkvtoolnix_utils.errors.base import ErrorHandler
from mkvtoolnix_utils.errors.exceptions import (BinaryNotFoundError,
                                                CommandFailedError,
                                                ConfigurationError,
                                                StreamReadError,
                                                ToolnixError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ToolnixError) des erreurs
    inattendues, et affiche une solution adaptée au type d'erreur.
    Pour un CommandFailedError, la sortie classifiée de la commande
    est affichée avant la solution.
    """

    def __init__(
        self,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            solutions: Dictionnaire {TypeException: "message solution"},
                prioritaire sur les messages par défaut.
        """
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        if isinstance(error, ToolnixError):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: ToolnixError) -> str:
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        if isinstance(error, BinaryNotFoundError):
            return ("Installez MKVToolNix ou renseignez binary_dir "
                    "dans la configuration.")
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        if isinstance(error, CommandFailedError):
            return "Corrigez les erreurs/avertissements listés ci-dessus."
        if isinstance(error, StreamReadError):
            return "Le processus a été interrompu, relancez la commande."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: ToolnixError) -> None:
        """Affiche le type, le message et la solution d'une erreur
        connue.

        Args:
            error: L'exception métier à traiter.
        """
        if isinstance(error, CommandFailedError):
            print(f"\n🛑 {type(error).__name__}: {error.message}")
            print(error.result.render(print_command=True))
        else:
            print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec "
            "ces informations."
        )
