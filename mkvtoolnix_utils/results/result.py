"""Résultats d'exécution des commandes MKVToolNix.

Deux variantes partagent le même contrat (CommandResult) :

    - LazyCommandResult : attaché à un processus en cours ; sa sortie
      peut être parcourue pendant l'exécution.
    - SyncCommandResult : instantané immuable, obtenu une seule fois en
      vidant un LazyCommandResult.

Les deux exposent :
    - output : les lignes classifiées, en ordre d'émission ;
    - exit_code : le code de sortie du processus ;
    - success : True si exit_code vaut le code de succès et que la
      sortie ne contient ni erreur ni avertissement.

Attention : sur un LazyCommandResult, exit_code et success bloquent
jusqu'à la fin du processus.

Example:
    with executor.execute(command) as result:
        for line in result.output:
            print(line)
        snapshot = result.to_sync()
"""

import threading
from abc import ABC, abstractmethod
from functools import cached_property
from typing import (TYPE_CHECKING, Callable, Iterable, Iterator, List,
                    Optional, Tuple, Type)

from mkvtoolnix_utils.config.models import DEFAULT_SUCCESS_CODE
from mkvtoolnix_utils.errors.exceptions import (CommandFailedError,
                                                ResultClosedError)
from mkvtoolnix_utils.results.line import (ClassifiedLine, has_errors,
                                           has_warnings)
from mkvtoolnix_utils.results.sequence import CachedLineSequence

if TYPE_CHECKING:
    from mkvtoolnix_utils.commands.base import ToolnixCommand
    from mkvtoolnix_utils.commands.formatter import CommandFormatter


class CommandResult(ABC):
    """Contrat commun aux résultats paresseux et figés.

    Attributes:
        _command: Commande à l'origine du résultat.
        _success_code: Code de sortie considéré comme un succès.
    """

    def __init__(
        self,
        command: "ToolnixCommand",
        success_code: int = DEFAULT_SUCCESS_CODE,
    ) -> None:
        self._command = command
        self._success_code = success_code

    @property
    def command(self) -> "ToolnixCommand":
        """Commande exécutée (lecture seule)."""
        return self._command

    @property
    def success_code(self) -> int:
        return self._success_code

    @property
    @abstractmethod
    def exit_code(self) -> int:
        """Code de sortie du processus."""
        pass

    @property
    @abstractmethod
    def output(self) -> Iterable[ClassifiedLine]:
        """Lignes classifiées, itérables plusieurs fois."""
        pass

    @cached_property
    def success(self) -> bool:
        """True si le code de sortie est le code de succès et que la
        sortie complète ne contient ni erreur ni avertissement.

        Sur un LazyCommandResult, bloque jusqu'à la fin du processus.
        """
        return self._evaluate_success()

    def _evaluate_success(self) -> bool:
        lines = self.output
        clean = not (has_errors(lines) or has_warnings(lines))
        return self.exit_code == self._success_code and clean

    def _render_lines(
        self,
        print_command: bool,
        print_output: bool,
        print_exit_code: bool,
        formatter: Optional["CommandFormatter"],
    ) -> Iterator[str]:
        """Produit les lignes de la représentation textuelle.

        Les lignes de sortie sont produites au fil de leur lecture.
        """
        if print_command:
            yield str(self._command)
            yield ""
        if print_output:
            for line in self.output:
                yield formatter.format_line(line) if formatter else str(line)
            yield ""
        if print_exit_code:
            if formatter:
                yield formatter.format_exit_code(
                    self.exit_code, self.exit_code == self._success_code
                )
            else:
                yield f"Code de sortie : {self.exit_code}"

    def render(
        self,
        print_command: bool = False,
        print_output: bool = True,
        print_exit_code: bool = True,
        formatter: Optional["CommandFormatter"] = None,
    ) -> str:
        """Représentation textuelle du résultat.

        Args:
            print_command: Inclure la commande en tête (défaut: False).
            print_output: Inclure la sortie du processus (défaut: True).
            print_exit_code: Inclure le code de sortie (défaut: True).
            formatter: Formateur optionnel des lignes (ex: ANSI).

        Returns:
            Texte multi-lignes, terminé par un saut de ligne.
        """
        return "".join(
            f"{line}\n" for line in self._render_lines(
                print_command, print_output, print_exit_code, formatter
            )
        )

    def print(
        self,
        print_command: bool = False,
        print_output: bool = True,
        print_exit_code: bool = True,
        formatter: Optional["CommandFormatter"] = None,
    ) -> None:
        """Affiche le résultat sur la sortie standard.

        Sur un LazyCommandResult, chaque ligne est affichée dès que le
        processus l'a produite.
        """
        for line in self._render_lines(
            print_command, print_output, print_exit_code, formatter
        ):
            print(line, flush=True)

    def __str__(self) -> str:
        return self.render()


class SyncCommandResult(CommandResult):
    """Résultat figé : code de sortie et sortie complète.

    Ne détient aucune ressource système ; peut être conservé et
    parcouru sans coût.
    """

    def __init__(
        self,
        command: "ToolnixCommand",
        exit_code: int,
        output: Iterable[ClassifiedLine],
        success_code: int = DEFAULT_SUCCESS_CODE,
    ) -> None:
        super().__init__(command, success_code)
        self._exit_code = exit_code
        self._lines: Tuple[ClassifiedLine, ...] = tuple(output)

    @property
    def exit_code(self) -> int:
        return self._exit_code

    @property
    def output(self) -> Tuple[ClassifiedLine, ...]:
        return self._lines

    @property
    def output_list(self) -> List[ClassifiedLine]:
        """Copie de la sortie sous forme de liste."""
        return list(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SyncCommandResult):
            return NotImplemented
        return (
            self._command == other._command
            and self._exit_code == other._exit_code
            and self._lines == other._lines
            and self._success_code == other._success_code
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"SyncCommandResult(command={self._command!r}, "
            f"exit_code={self._exit_code}, lines={len(self._lines)})"
        )


class LazyCommandResult(CommandResult):
    """Résultat attaché à un processus en cours d'exécution.

    Possède le flux de sortie du processus et doit être fermé sur tous
    les chemins : close(), bloc with, to_sync() ou
    wait_for_completion().

    Attributes:
        _stream: Flux de sortie du processus (fermé par close()).
        _sequence: Sortie classifiée mise en cache.
        _exit_code_evaluator: Attend la fin du processus et retourne
            son code de sortie.
        _reaper: Récupère le processus s'il est déjà terminé, sans
            bloquer (ex: process.poll).
    """

    def __init__(
        self,
        command: "ToolnixCommand",
        stream,
        sequence: CachedLineSequence,
        exit_code_evaluator: Callable[[], int],
        success_code: int = DEFAULT_SUCCESS_CODE,
        failure_error: Type[CommandFailedError] = CommandFailedError,
        reaper: Optional[Callable[[], object]] = None,
    ) -> None:
        """Initialise le résultat.

        Args:
            command: Commande exécutée.
            stream: Flux de sortie du processus, possédé par ce résultat.
            sequence: Séquence mise en cache lisant ce flux.
            exit_code_evaluator: Callable bloquant retournant le code
                de sortie (ex: process.wait).
            success_code: Code de sortie considéré comme un succès.
            failure_error: Exception levée par wait_for_completion.
            reaper: Callable non bloquant appelé par close().
        """
        super().__init__(command, success_code)
        self._stream = stream
        self._sequence = sequence
        self._exit_code_evaluator = exit_code_evaluator
        self._failure_error = failure_error
        self._reaper = reaper
        self._exit_code: Optional[int] = None
        self._exit_code_lock = threading.Lock()
        self._close_lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def output(self) -> CachedLineSequence:
        """Séquence de sortie, parcourable pendant l'exécution.

        La parcourir n'attend pas le code de sortie.
        """
        return self._sequence

    @property
    def exit_code(self) -> int:
        """Code de sortie, mémorisé au premier accès.

        Bloque jusqu'à la fin du processus. Tant que le résultat est
        ouvert, la sortie restante est d'abord mise en cache pour que
        le processus ne reste pas bloqué sur un pipe plein. Une
        fermeture avant ou pendant ce vidage ne lève rien.
        """
        with self._exit_code_lock:
            if self._exit_code is None:
                try:
                    self._sequence.drain()
                except ResultClosedError:
                    # Fermé : le reste de la sortie est abandonné.
                    pass
                self._exit_code = self._exit_code_evaluator()
            return self._exit_code

    def _evaluate_success(self) -> bool:
        # Vidage complet avant tout : has_errors s'arrête au premier match.
        self._sequence.drain()
        return super()._evaluate_success()

    def _snapshot(self) -> SyncCommandResult:
        return SyncCommandResult(
            self._command,
            self.exit_code,
            self._sequence,
            self._success_code,
        )

    def to_sync(self) -> SyncCommandResult:
        """Attend la fin du processus et retourne un résultat figé,
        sans vérifier le succès. Ferme le flux dans tous les cas.
        """
        with self:
            return self._snapshot()

    def wait_for_completion(self) -> SyncCommandResult:
        """Attend la fin du processus et exige le succès.

        Le flux est fermé dans tous les cas.

        Returns:
            Le résultat figé.

        Raises:
            CommandFailedError: (ou la sous-classe propre à la commande)
                si le code de sortie n'est pas le code de succès ou si
                la sortie contient des erreurs ou avertissements.
            StreamReadError: Si la lecture de la sortie a échoué.
        """
        with self:
            snapshot = self._snapshot()
            if not self.success:
                raise self._failure_error(
                    snapshot, "Des erreurs ou avertissements ont été produits"
                )
            return snapshot

    def close(self) -> None:
        """Ferme le flux de sortie du processus. Idempotent.

        Ne bloque pas sur une lecture en cours dans un autre thread :
        le flux est alors fermé par ce lecteur dès que sa lecture se
        termine. Ne tue pas le processus ; s'il est déjà terminé, il
        est récupéré, sinon seul exit_code l'attend. Le tampon déjà lu
        reste disponible.
        """
        with self._close_lock:
            if self._closed:
                return
            self._closed = True
            self._sequence.close(self._stream.close)
            if self._reaper is not None:
                self._reaper()

    def __enter__(self) -> "LazyCommandResult":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "fermé" if self._closed else "ouvert"
        return f"LazyCommandResult(command={self._command!r}, {state})"
