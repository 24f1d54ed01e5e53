"""Exécuteur des commandes MKVToolNix via subprocess.

Ce module fournit ToolnixCommandExecutor, une implémentation concrète
de CommandExecutor qui lance l'outil avec subprocess.Popen et branche
sa sortie standard sur une CachedLineSequence.

Chaque ligne est journalisée une seule fois, au moment où elle est lue,
avec le niveau correspondant à sa sévérité (INFO, WARNING, ERROR).

Example :
    Exécution paresseuse, sortie parcourue pendant le traitement :

        from mkvtoolnix_utils.commands import ToolnixCommandExecutor

        executor = ToolnixCommandExecutor(logger=logger)
        with executor.execute(command) as result:
            for line in result.output:
                print(line)
            print(result.exit_code)

    Exécution bloquante avec vérification du succès :

        snapshot = executor.run(command)
"""

import os
import subprocess  # nosec B404
from typing import Dict, Optional

from mkvtoolnix_utils.commands.base import CommandExecutor, ToolnixCommand
from mkvtoolnix_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from mkvtoolnix_utils.config.models import ToolnixConfig
from mkvtoolnix_utils.errors.exceptions import (BinaryNotFoundError,
                                                CommandFailedError)
from mkvtoolnix_utils.logging.base import Logger
from mkvtoolnix_utils.logging.file_logger import FileLogger
from mkvtoolnix_utils.results.line import (ClassifiedLine, Severity,
                                           build_prefix_table)
from mkvtoolnix_utils.results.result import (LazyCommandResult,
                                             SyncCommandResult)
from mkvtoolnix_utils.results.sequence import CachedLineSequence


class ToolnixCommandExecutor(CommandExecutor):
    """Exécuteur des commandes MKVToolNix via subprocess.

    stderr est fusionné dans stdout : les outils écrivent leurs erreurs
    et avertissements sur stdout, et un seul flux préserve l'ordre
    chronologique des lignes.

    Attributes:
        _config: Configuration (binaires, code de succès, préfixes).
        _logger: Logger optionnel pour les logs fichier.
        _plain: Formateur texte brut pour les logs fichier.
        _console_formatter: Formateur optionnel pour la console.
    """

    def __init__(
        self,
        config: Optional[ToolnixConfig] = None,
        logger: Optional[Logger] = None,
        console_formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """Initialise l'exécuteur.

        Args:
            config: Configuration. Si None, configuration par défaut.
            logger: Logger optionnel. Si None, un FileLogger est créé
                lorsque la configuration désigne un fichier de log.
            console_formatter: Formateur optionnel pour annoncer
                chaque lancement sur la console.
        """
        self._config = config or ToolnixConfig()
        self._logger = logger or FileLogger.from_config(
            self._config.logging
        )
        self._prefixes = build_prefix_table(
            self._config.error_prefix, self._config.warning_prefix
        )
        self._plain = PlainCommandFormatter()
        self._console_formatter = console_formatter

    @property
    def config(self) -> ToolnixConfig:
        return self._config

    def _build_env(
        self,
        env: Optional[Dict[str, str]] = None,
    ) -> Optional[Dict[str, str]]:
        """Construit l'environnement d'exécution.

        Fusionne os.environ, l'environnement configuré et env.
        Retourne None si aucun environnement personnalisé
        (subprocess utilisera os.environ par défaut).
        """
        if not self._config.env and not env:
            return None
        merged = os.environ.copy()
        merged.update(self._config.env)
        if env:
            merged.update(env)
        return merged

    def _resolve_cwd(self, cwd: Optional[str] = None) -> Optional[str]:
        """Le répertoire de l'appel est prioritaire sur la
        configuration.
        """
        if cwd is not None:
            return cwd
        if self._config.working_directory is not None:
            return str(self._config.working_directory)
        return None

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def _log_line(self, line: ClassifiedLine) -> None:
        """Journalise une ligne au niveau de sa sévérité."""
        if not self._logger:
            return
        message = self._plain.format_line(line)
        if line.severity == Severity.ERROR:
            self._logger.log_error(message)
        elif line.severity == Severity.WARNING:
            self._logger.log_warning(message)
        else:
            self._logger.log_info(message)

    def execute(
        self,
        command: ToolnixCommand,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
    ) -> LazyCommandResult:
        """Lance le processus et retourne sans attendre sa fin.

        La propriété du flux de sortie passe au résultat retourné,
        seul responsable de sa fermeture.

        Args:
            command: Commande à exécuter.
            env: Variables d'environnement supplémentaires.
            cwd: Répertoire de travail (prioritaire).

        Returns:
            Résultat paresseux attaché au processus.

        Raises:
            BinaryNotFoundError: Si l'exécutable est introuvable.
            OSError: Si le processus ne peut pas être lancé.
        """
        command_line = command.command_line(self._config)

        self._log(self._plain.format_start(command_line))
        if self._console_formatter:
            print(self._console_formatter.format_start(command_line))

        try:
            proc = subprocess.Popen(  # nosec B603
                command_line,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=self._build_env(env),
                cwd=self._resolve_cwd(cwd),
            )
        except FileNotFoundError as e:
            self._log_error(f"Exécutable introuvable : {command_line[0]}")
            raise BinaryNotFoundError(
                f"Exécutable introuvable : {command_line[0]}"
            ) from e
        except OSError as e:
            self._log_error(f"Erreur système : {e}")
            raise

        def wait_for_exit_code() -> int:
            exit_code = proc.wait()
            self._log(
                self._plain.format_exit_code(
                    exit_code, exit_code == self._config.success_code
                )
            )
            return exit_code

        sequence = CachedLineSequence(
            proc.stdout, self._prefixes, listener=self._log_line
        )
        return LazyCommandResult(
            command,
            proc.stdout,
            sequence,
            wait_for_exit_code,
            success_code=self._config.success_code,
            failure_error=command.failure_error,
            reaper=proc.poll,
        )

    def run(
        self,
        command: ToolnixCommand,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
    ) -> SyncCommandResult:
        """Exécute la commande jusqu'à son terme et exige le succès.

        Raises:
            CommandFailedError: (failure_error de la commande) si le
                code de sortie ou la sortie signalent un échec.
        """
        result = self.execute(command, env=env, cwd=cwd)
        try:
            return result.wait_for_completion()
        except CommandFailedError as e:
            self._log_error(f"{type(e).__name__}: {e.message} : {command}")
            raise
