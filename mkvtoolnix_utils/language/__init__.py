"""Module des langues MKVToolNix."""

from mkvtoolnix_utils.language.models import (
    ToolnixLanguage,
    is_none_or_undefined,
)
from mkvtoolnix_utils.language.table import (
    LanguageTable,
    ListLanguagesCommand,
    parse_language_table,
)

__all__ = [
    "ToolnixLanguage",
    "is_none_or_undefined",
    "LanguageTable",
    "ListLanguagesCommand",
    "parse_language_table",
]
