"""Chargement de la table des langues de mkvmerge.

Deux formats de "mkvmerge --list-languages" existent :

    Récent : nom anglais | ISO 639-3 | ISO 639-2 | ISO 639-1
    Ancien : nom anglais | ISO 639-2 | ISO 639-1

La première ligne (en-tête) détermine le format. Dans l'ancien format,
le code ISO 639-2 tient lieu de code ISO 639-3.
"""

import re
import threading
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from mkvtoolnix_utils.commands.base import (CommandExecutor, ToolnixBinary,
                                            ToolnixCommand)
from mkvtoolnix_utils.errors.exceptions import ToolnixError
from mkvtoolnix_utils.language.models import (ENGLISH_CODE, UNDEFINED_CODE,
                                              ToolnixLanguage)

_ISO_639_3_PATTERN = re.compile(
    r"^\s*([^|]+?)\s*\|\s*([a-z]{3})\s*\|\s*([a-z]{3})?\s*"
    r"\|\s*([a-z]{2})?\s*$"
)
_LEGACY_PATTERN = re.compile(
    r"^\s*([^|]+?)\s*\|\s*([a-z]{3})\s*\|\s*([a-z]{2})?\s*$"
)

LineParser = Callable[[str], Optional[ToolnixLanguage]]


def _parse_iso639_3_line(line: str) -> Optional[ToolnixLanguage]:
    match = _ISO_639_3_PATTERN.match(line)
    if match is None:
        return None
    name, iso3, iso2, iso1 = match.groups()
    return ToolnixLanguage(name.strip(), iso3, iso2 or None, iso1 or None)


def _parse_legacy_line(line: str) -> Optional[ToolnixLanguage]:
    match = _LEGACY_PATTERN.match(line)
    if match is None:
        return None
    name, iso2, iso1 = match.groups()
    return ToolnixLanguage(name.strip(), iso2, iso2, iso1 or None)


def parse_language_table(lines: Iterable[str]) -> Dict[str, ToolnixLanguage]:
    """Analyse la sortie de "mkvmerge --list-languages".

    Les lignes non reconnues (séparateurs, lignes vides) sont ignorées.

    Args:
        lines: Lignes de sortie, en-tête compris.

    Returns:
        Langues indexées par code ISO 639-3.
    """
    iterator: Iterator[str] = iter(lines)
    header = next(iterator, "")
    parser: LineParser = (
        _parse_iso639_3_line if "ISO 639-3" in header
        else _parse_legacy_line
    )
    languages: Dict[str, ToolnixLanguage] = {}
    for line in iterator:
        language = parser(line.rstrip("\r\n"))
        if language is not None:
            languages[language.iso639_3] = language
    return languages


class ListLanguagesCommand(ToolnixCommand):
    """Commande "mkvmerge --list-languages"."""

    def __init__(self, executor: Optional[CommandExecutor] = None) -> None:
        super().__init__(ToolnixBinary.MKV_MERGE, executor)

    def command_args(self) -> List[str]:
        return ["--list-languages"]


class LanguageTable:
    """Table des langues de mkvmerge, chargée au premier accès.

    Example:
        >>> table = LanguageTable()
        >>> table["fre"].name
        'French'
    """

    def __init__(self, executor: Optional[CommandExecutor] = None) -> None:
        """Initialise la table sans lancer mkvmerge.

        Args:
            executor: Exécuteur utilisé au premier chargement.
        """
        self._executor = executor
        self._languages: Optional[Dict[str, ToolnixLanguage]] = None
        self._lock = threading.Lock()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LanguageTable":
        """Construit une table à partir d'une sortie déjà capturée."""
        table = cls()
        table._languages = parse_language_table(lines)
        return table

    @property
    def languages(self) -> Dict[str, ToolnixLanguage]:
        """Langues indexées par ISO 639-3 (chargement unique)."""
        with self._lock:
            if self._languages is None:
                self._languages = self._load()
            return self._languages

    def _load(self) -> Dict[str, ToolnixLanguage]:
        """Lance mkvmerge et analyse sa sortie.

        Raises:
            ToolnixError: Si aucune langue n'a pu être lue.
        """
        result = ListLanguagesCommand(self._executor).execute_lazy().to_sync()
        languages = parse_language_table(line.message for line in result.output)
        if not languages:
            raise ToolnixError(
                "Aucune langue lue dans la sortie de mkvmerge "
                f"(code de sortie {result.exit_code})"
            )
        return languages

    def __getitem__(self, code: str) -> ToolnixLanguage:
        """Retourne la langue de code ISO 639-3.

        Raises:
            KeyError: Si le code est inconnu.
        """
        return self.languages[code]

    def get(self, code: str) -> Optional[ToolnixLanguage]:
        return self.languages.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self.languages

    def __len__(self) -> int:
        return len(self.languages)

    @property
    def english(self) -> ToolnixLanguage:
        return self[ENGLISH_CODE]

    @property
    def undefined(self) -> ToolnixLanguage:
        return self[UNDEFINED_CODE]
