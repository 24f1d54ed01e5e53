"""Séquence de lignes classifiées mise en cache.

La sortie standard d'un processus ne se lit qu'une fois. CachedLineSequence
la présente comme une séquence itérable plusieurs fois : chaque ligne est
lue, classifiée et ajoutée à un tampon une seule fois ; les itérations
suivantes rejouent le tampon avant de reprendre la lecture du flux.

Example:
    Lecture de la sortie d'un processus en cours :

        sequence = CachedLineSequence(process.stdout)
        for line in sequence:      # lit le flux au fil de l'eau
            print(line)
        lines = list(sequence)     # rejoue le tampon, aucune relecture

Note:
    Plusieurs itérateurs (éventuellement sur plusieurs threads) peuvent
    parcourir la même séquence. La lecture du flux est sérialisée par un
    verrou ; la lecture du tampon ne l'est pas, le tampon n'étant jamais
    que complété en fin de liste.
"""

import threading
from typing import (Callable, Iterable, Iterator, List, Mapping, Optional,
                    Tuple)

from mkvtoolnix_utils.errors.exceptions import (ResultClosedError,
                                                StreamReadError)
from mkvtoolnix_utils.results.line import (
    DEFAULT_SEVERITY_PREFIXES,
    ClassifiedLine,
    Severity,
    classify,
)

LineListener = Callable[[ClassifiedLine], None]


class CachedLineSequence:
    """Itérable multi-passes adossé à un flux texte à lecture unique.

    Attributes:
        _lines: Itérateur sur les lignes brutes du flux.
        _prefixes: Table préfixe -> sévérité utilisée par classify.
        _listener: Callback optionnel appelé une fois par nouvelle ligne.
        _buffer: Lignes déjà classifiées, en ordre d'émission.
        _lock: Verrou sérialisant la lecture du flux.
        _exhausted: True une fois la fin du flux atteinte.
        _failure: Erreur de lecture mémorisée, le cas échéant.
        _closed: True après close().
        _state_lock: Verrou court protégeant _reading et
            _pending_release.
        _reading: True pendant un appel bloquant au flux.
        _pending_release: Libération du flux différée jusqu'à la fin
            de la lecture en cours.
    """

    def __init__(
        self,
        source: Iterable[str],
        prefixes: Mapping[str, Severity] = DEFAULT_SEVERITY_PREFIXES,
        listener: Optional[LineListener] = None,
    ) -> None:
        """Initialise la séquence sans rien lire.

        Args:
            source: Flux texte (ex: process.stdout) ou tout itérable
                de lignes brutes.
            prefixes: Table préfixe -> sévérité.
            listener: Callback appelé exactement une fois par ligne,
                au moment où elle est lue sur le flux.
        """
        self._lines: Iterator[str] = iter(source)
        self._prefixes = prefixes
        self._listener = listener
        self._buffer: List[ClassifiedLine] = []
        self._lock = threading.Lock()
        self._exhausted = False
        self._failure: Optional[StreamReadError] = None
        self._closed = False
        self._state_lock = threading.Lock()
        self._reading = False
        self._pending_release: Optional[Callable[[], None]] = None

    @property
    def exhausted(self) -> bool:
        """True si toute la sortie a été lue et mise en cache."""
        return self._exhausted

    @property
    def buffered(self) -> Tuple[ClassifiedLine, ...]:
        """Instantané des lignes déjà lues, sans lecture du flux."""
        return tuple(self._buffer)

    def __iter__(self) -> Iterator[ClassifiedLine]:
        """Rejoue le tampon puis poursuit la lecture du flux.

        Peut bloquer tant que le processus n'a ni écrit la ligne
        suivante ni fermé sa sortie.

        Raises:
            StreamReadError: Si la lecture du flux a échoué.
            ResultClosedError: Si la séquence a été fermée avant
                la fin du flux.
        """
        index = 0
        while True:
            if index < len(self._buffer):
                yield self._buffer[index]
                index += 1
            elif not self._fill(index):
                return

    def drain(self) -> None:
        """Lit et met en cache toute la sortie restante."""
        for _ in self:
            pass

    def close(self, release: Optional[Callable[[], None]] = None) -> None:
        """Interdit toute lecture ultérieure du flux.

        Le tampon reste consultable. Ne prend pas le verrou de lecture :
        un lecteur bloqué sur le flux n'empêche pas la fermeture.

        Args:
            release: Libération du flux (ex: stream.close), appelée une
                seule fois : tout de suite si aucune lecture n'est en
                cours, sinon par le lecteur dès que sa lecture se
                termine.
        """
        with self._state_lock:
            self._closed = True
            if self._reading:
                self._pending_release = release
                return
        if release is not None:
            release()

    def _fill(self, index: int) -> bool:
        """Garantit que le tampon contient la ligne d'indice index.

        Returns:
            False si le flux est terminé avant cet indice.
        """
        with self._lock:
            while len(self._buffer) <= index:
                if self._exhausted:
                    return False
                if self._failure is not None:
                    raise StreamReadError(
                        str(self._failure)
                    ) from self._failure
                with self._state_lock:
                    # Vérifié sous le même verrou que close() : pas de
                    # lecture commencée après une fermeture.
                    if self._closed:
                        raise ResultClosedError(
                            "La sortie a été fermée avant d'être "
                            "entièrement lue"
                        )
                    self._reading = True
                try:
                    self._pull()
                finally:
                    self._end_read()
            return True

    def _end_read(self) -> None:
        """Termine une lecture et exécute la libération différée."""
        with self._state_lock:
            self._reading = False
            release, self._pending_release = self._pending_release, None
        if release is not None:
            release()

    def _pull(self) -> None:
        """Lit une ligne brute, la classe et l'ajoute au tampon.

        Doit être appelée verrou acquis.
        """
        try:
            raw = next(self._lines)
        except StopIteration:
            self._exhausted = True
            return
        except (OSError, ValueError) as e:
            if self._closed:
                raise ResultClosedError(
                    "La sortie a été fermée pendant la lecture"
                ) from e
            self._failure = StreamReadError(
                f"Échec de lecture de la sortie du processus : {e}"
            )
            self._failure.__cause__ = e
            raise self._failure

        line = classify(raw, self._prefixes)
        self._buffer.append(line)
        if self._listener is not None:
            self._listener(line)
