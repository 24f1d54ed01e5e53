"""Modifications de propriétés appliquées à un élément édité."""

from typing import List, Tuple, Union

from mkvtoolnix_utils.commands.base import CommandArgs
from mkvtoolnix_utils.language.models import ToolnixLanguage


def _check_name(name: str) -> None:
    if not name or not name.strip():
        raise ValueError("Le nom de propriété est requis.")


def _flag(value: bool) -> str:
    return "1" if value else "0"


class PropertyEdits(CommandArgs):
    """Suite ordonnée de --set, --add et --delete.

    Example:
        >>> edits = PropertyEdits().set_language("eng").delete_name()
        >>> edits.command_args()
        ['--set', 'language=eng', '--delete', 'name']
    """

    def __init__(self) -> None:
        self._edits: List[Tuple[str, str]] = []

    def set(self, name: str, value: str) -> "PropertyEdits":
        """Fixe une propriété (--set nom=valeur)."""
        _check_name(name)
        self._edits.append(("--set", f"{name}={value}"))
        return self

    def add(self, name: str, value: str) -> "PropertyEdits":
        """Ajoute une propriété (--add nom=valeur)."""
        _check_name(name)
        self._edits.append(("--add", f"{name}={value}"))
        return self

    def delete(self, name: str) -> "PropertyEdits":
        """Supprime une propriété (--delete nom)."""
        _check_name(name)
        self._edits.append(("--delete", name))
        return self

    def set_language(
        self, language: Union[ToolnixLanguage, str]
    ) -> "PropertyEdits":
        if isinstance(language, ToolnixLanguage):
            language = language.iso639_3
        return self.set("language", language)

    def set_name(self, name: str) -> "PropertyEdits":
        return self.set("name", name)

    def delete_name(self) -> "PropertyEdits":
        return self.delete("name")

    def set_default_flag(self, value: bool = True) -> "PropertyEdits":
        return self.set("flag-default", _flag(value))

    def set_forced_flag(self, value: bool = True) -> "PropertyEdits":
        return self.set("flag-forced", _flag(value))

    def set_enabled_flag(self, value: bool = True) -> "PropertyEdits":
        return self.set("flag-enabled", _flag(value))

    def set_title(self, title: str) -> "PropertyEdits":
        """Titre du segment (sélecteur info)."""
        return self.set("title", title)

    def __len__(self) -> int:
        return len(self._edits)

    def command_args(self) -> List[str]:
        args: List[str] = []
        for option, value in self._edits:
            args.extend([option, value])
        return args
