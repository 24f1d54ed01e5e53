"""Interfaces abstraites des commandes MKVToolNix et de leur exécution.

Ce module définit :
    - CommandArgs : tout élément qui se traduit en arguments.
    - ToolnixBinary : exécutables de la suite MKVToolNix.
    - ToolnixCommand : commande complète, exécutable.
    - CommandExecutor : interface abstraite des exécuteurs.
"""

import shlex
import shutil
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import TYPE_CHECKING, Dict, List, Optional, Type

from mkvtoolnix_utils.config.models import ToolnixConfig
from mkvtoolnix_utils.errors.exceptions import (BinaryNotFoundError,
                                                CommandFailedError)

if TYPE_CHECKING:
    from mkvtoolnix_utils.commands.formatter import CommandFormatter
    from mkvtoolnix_utils.results.result import (LazyCommandResult,
                                                 SyncCommandResult)


class CommandArgs(ABC):
    """Élément de commande convertible en liste d'arguments."""

    @abstractmethod
    def command_args(self) -> List[str]:
        """Retourne les arguments, dans l'ordre attendu par l'outil."""
        pass


class ToolnixBinary(StrEnum):
    """Exécutables de la suite MKVToolNix."""

    MKV_MERGE = "mkvmerge"
    MKV_PROPEDIT = "mkvpropedit"
    MKV_EXTRACT = "mkvextract"
    MKV_INFO = "mkvinfo"

    def resolve(self, config: Optional[ToolnixConfig] = None) -> str:
        """Résout le chemin de l'exécutable.

        binary_dir est prioritaire sur le PATH.

        Args:
            config: Configuration (binary_dir optionnel).

        Returns:
            Chemin de l'exécutable.

        Raises:
            BinaryNotFoundError: Si l'exécutable est introuvable.
        """
        if config is not None and config.binary_dir is not None:
            candidate = config.binary_dir / self.value
            if candidate.is_file():
                return str(candidate)
            raise BinaryNotFoundError(
                f"{self.value} introuvable dans {config.binary_dir}"
            )
        found = shutil.which(self.value)
        if found is None:
            raise BinaryNotFoundError(
                f"{self.value} introuvable dans le PATH"
            )
        return found


class ToolnixCommand(CommandArgs):
    """Commande d'un outil MKVToolNix.

    Les sous-classes fournissent command_args() et, le cas échéant,
    l'exception levée en cas d'échec (failure_error).

    Attributes:
        binary: Exécutable à lancer.
        failure_error: Exception levée par wait_for_completion.
    """

    failure_error: Type[CommandFailedError] = CommandFailedError

    def __init__(
        self,
        binary: ToolnixBinary,
        executor: Optional["CommandExecutor"] = None,
    ) -> None:
        """Initialise la commande.

        Args:
            binary: Exécutable à lancer.
            executor: Exécuteur à utiliser. Si None, un
                ToolnixCommandExecutor par défaut est créé à la
                première exécution.
        """
        self.binary = binary
        self._executor = executor

    @property
    def executor(self) -> "CommandExecutor":
        if self._executor is None:
            from mkvtoolnix_utils.commands.runner import (
                ToolnixCommandExecutor,
            )
            self._executor = ToolnixCommandExecutor()
        return self._executor

    def command_line(
        self, config: Optional[ToolnixConfig] = None
    ) -> List[str]:
        """Commande complète : chemin de l'exécutable puis arguments.

        Raises:
            BinaryNotFoundError: Si l'exécutable est introuvable.
        """
        return [self.binary.resolve(config)] + self.command_args()

    def execute_lazy(self) -> "LazyCommandResult":
        """Lance le processus et retourne immédiatement.

        L'appelant doit fermer le résultat (with, close(), to_sync()
        ou wait_for_completion()).
        """
        return self.executor.execute(self)

    def execute(self) -> "SyncCommandResult":
        """Exécute la commande jusqu'à son terme.

        Raises:
            CommandFailedError: (failure_error) si la commande échoue.
        """
        return self.execute_lazy().wait_for_completion()

    def execute_and_print(
        self,
        print_command: bool = False,
        print_output: bool = True,
        print_exit_code: bool = True,
        formatter: Optional["CommandFormatter"] = None,
    ) -> "SyncCommandResult":
        """Exécute la commande en affichant chaque ligne dès sa
        production, puis exige le succès.

        Raises:
            CommandFailedError: (failure_error) si la commande échoue.
        """
        result = self.execute_lazy()
        try:
            result.print(
                print_command, print_output, print_exit_code, formatter
            )
        except BaseException:
            result.close()
            raise
        return result.wait_for_completion()

    def __str__(self) -> str:
        return shlex.join([self.binary.value] + self.command_args())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution des commandes."""

    @abstractmethod
    def execute(
        self,
        command: ToolnixCommand,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
    ) -> "LazyCommandResult":
        """Lance le processus de la commande sans attendre sa fin.

        Args:
            command: Commande à exécuter.
            env: Variables d'environnement supplémentaires.
            cwd: Répertoire de travail.

        Returns:
            Résultat paresseux, propriétaire du flux de sortie.
        """
        pass
