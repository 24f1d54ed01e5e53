"""Langues reconnues par MKVToolNix."""

from dataclasses import dataclass, field
from typing import Optional

UNDEFINED_CODE = "und"
ENGLISH_CODE = "eng"


@dataclass(frozen=True)
class ToolnixLanguage:
    """Langue listée par "mkvmerge --list-languages".

    L'égalité et le hachage ne portent que sur le code ISO 639-3.

    Attributes:
        name: Nom anglais de la langue.
        iso639_3: Code ISO 639-3 (trois lettres), toujours présent.
        iso639_2: Code ISO 639-2 (trois lettres), optionnel.
        iso639_1: Code ISO 639-1 (deux lettres), optionnel.
    """

    name: str = field(compare=False)
    iso639_3: str
    iso639_2: Optional[str] = field(default=None, compare=False)
    iso639_1: Optional[str] = field(default=None, compare=False)

    def is_undefined(self) -> bool:
        return self.iso639_3 == UNDEFINED_CODE

    def is_english(self) -> bool:
        return self.iso639_3 == ENGLISH_CODE

    @property
    def selector_code(self) -> str:
        """Code utilisé dans les sélections de pistes mkvmerge."""
        return self.iso639_2 or self.iso639_3

    def __str__(self) -> str:
        return f"{self.name} ({self.iso639_3})"


def is_none_or_undefined(language: Optional[ToolnixLanguage]) -> bool:
    return language is None or language.is_undefined()
