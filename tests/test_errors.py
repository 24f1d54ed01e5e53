"""Tests pour le module errors."""

from unittest.mock import MagicMock, patch

import pytest

from conftest import FakeCommand
from mkvtoolnix_utils.errors import (
    BinaryNotFoundError,
    CommandFailedError,
    ConfigurationError,
    ConsoleErrorHandler,
    ErrorHandler,
    ErrorHandlerChain,
    LoggerErrorHandler,
    MkvMergeError,
    MkvPropEditError,
    ToolnixError,
)
from mkvtoolnix_utils.logging.base import Logger
from mkvtoolnix_utils.results import (
    ClassifiedLine,
    Severity,
    SyncCommandResult,
)


def _failed_result() -> SyncCommandResult:
    return SyncCommandResult(
        FakeCommand(["--output", "out.mkv"]),
        2,
        [
            ClassifiedLine("Starting.", Severity.INFO),
            ClassifiedLine("fichier introuvable", Severity.ERROR),
        ],
    )


class TestHierarchie:
    """Tests de la hiérarchie d'exceptions."""

    @pytest.mark.parametrize("error_type", [
        ConfigurationError, BinaryNotFoundError,
        CommandFailedError, MkvMergeError, MkvPropEditError,
    ])
    def test_toutes_derivent_de_toolnix_error(self, error_type):
        assert issubclass(error_type, ToolnixError)

    def test_erreurs_de_commande(self):
        assert issubclass(MkvMergeError, CommandFailedError)
        assert issubclass(MkvPropEditError, CommandFailedError)


class TestCommandFailedError:
    """Tests de l'erreur portant le résultat d'une commande."""

    def test_expose_le_resultat(self):
        result = _failed_result()
        error = CommandFailedError(result, "Échec")

        assert error.result is result
        assert error.exit_code == 2
        assert error.output[1].severity is Severity.ERROR

    def test_str_contient_la_sortie(self):
        text = str(CommandFailedError(_failed_result(), "Échec"))
        assert text.startswith("Échec\n")
        assert "mkvmerge --output out.mkv" in text
        assert "ERROR: fichier introuvable" in text
        assert "Code de sortie : 2" in text

    def test_cause(self):
        cause = OSError("pipe")
        error = CommandFailedError(_failed_result(), "Échec", cause)
        assert error.__cause__ is cause


class TestConsoleErrorHandler:
    """Tests pour ConsoleErrorHandler."""

    @patch("builtins.print")
    def test_erreur_connue(self, mock_print):
        ConsoleErrorHandler().handle(BinaryNotFoundError("mkvmerge absent"))

        printed = " ".join(str(c[0][0]) for c in mock_print.call_args_list)
        assert "BinaryNotFoundError: mkvmerge absent" in printed
        assert "Installez MKVToolNix" in printed

    @patch("builtins.print")
    def test_commande_en_echec_affiche_la_sortie(self, mock_print):
        error = MkvMergeError(_failed_result(), "Échec de mkvmerge")
        ConsoleErrorHandler().handle(error)

        printed = " ".join(str(c[0][0]) for c in mock_print.call_args_list)
        assert "MkvMergeError: Échec de mkvmerge" in printed
        assert "ERROR: fichier introuvable" in printed

    @patch("builtins.print")
    def test_solution_personnalisee(self, mock_print):
        handler = ConsoleErrorHandler(
            solutions={ConfigurationError: "Lancez avec --config."}
        )
        handler.handle(ConfigurationError("invalide"))

        printed = " ".join(str(c[0][0]) for c in mock_print.call_args_list)
        assert "Lancez avec --config." in printed

    @patch("builtins.print")
    def test_erreur_inattendue(self, mock_print):
        ConsoleErrorHandler().handle(RuntimeError("boom"))

        printed = " ".join(str(c[0][0]) for c in mock_print.call_args_list)
        assert "Erreur inattendue: boom" in printed
        assert "RuntimeError" in printed


class TestLoggerErrorHandler:
    """Tests pour LoggerErrorHandler."""

    def setup_method(self):
        self.mock_logger = MagicMock(spec=Logger)
        self.handler = LoggerErrorHandler(self.mock_logger)

    def test_commande_en_echec_ligne_par_ligne(self):
        self.handler.handle(CommandFailedError(_failed_result(), "Échec"))

        calls = [c[0][0] for c in self.mock_logger.log_error.call_args_list]
        assert calls == [
            "CommandFailedError: Échec (code de sortie 2)",
            "INFO: Starting.",
            "ERROR: fichier introuvable",
        ]

    def test_erreur_connue(self):
        self.handler.handle(ConfigurationError("invalide"))
        self.mock_logger.log_error.assert_called_once_with(
            "ConfigurationError: invalide"
        )

    def test_erreur_inattendue(self):
        self.handler.handle(ValueError("x"))
        self.mock_logger.log_error.assert_called_once_with(
            "Erreur inattendue: ValueError: x"
        )


class TestErrorHandlerChain:
    """Tests pour ErrorHandlerChain."""

    def test_diffuse_a_tous_les_handlers(self):
        first = MagicMock(spec=ErrorHandler)
        second = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain().add_handler(first).add_handler(second)
        error = ToolnixError("x")

        chain.handle(error)

        first.handle.assert_called_once_with(error)
        second.handle.assert_called_once_with(error)

    def test_handle_and_exit(self):
        handler = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain().add_handler(handler)

        with pytest.raises(SystemExit) as exc_info:
            chain.handle_and_exit(ToolnixError("x"), exit_code=3)

        assert exc_info.value.code == 3
        handler.handle.assert_called_once()
