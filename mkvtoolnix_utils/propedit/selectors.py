"""Sélecteurs placés après --edit.

Voir https://mkvtoolnix.download/doc/mkvpropedit.html#mkvpropedit.edit_selectors
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import List

from mkvtoolnix_utils.commands.base import CommandArgs


class TrackType(StrEnum):
    """Lettre de type utilisée par les sélecteurs positionnels."""

    VIDEO = "v"
    AUDIO = "a"
    SUBTITLE = "s"
    BUTTON = "b"


class EditSelector(CommandArgs):
    """Élément édité par les --set/--add/--delete qui suivent."""

    def selector(self) -> str:
        raise NotImplementedError

    def command_args(self) -> List[str]:
        return ["--edit", self.selector()]


class InfoSelector(EditSelector):
    """Section d'informations du segment (titre, dates...)."""

    def selector(self) -> str:
        return "info"


def _check_positive(value: int, what: str) -> None:
    if value < 1:
        raise ValueError(f"{what} doit être >= 1, reçu : {value}")


@dataclass(frozen=True)
class TrackByNumber(EditSelector):
    """n-ième piste du fichier, toutes catégories confondues."""

    number: int

    def __post_init__(self) -> None:
        _check_positive(self.number, "Le numéro de piste")

    def selector(self) -> str:
        return f"track:{self.number}"


@dataclass(frozen=True)
class TrackByUid(EditSelector):
    """Piste désignée par son UID Matroska."""

    uid: int

    def selector(self) -> str:
        return f"track:={self.uid}"


@dataclass(frozen=True)
class TrackByMatroskaNumber(EditSelector):
    """Piste désignée par son champ "track number" Matroska."""

    number: int

    def __post_init__(self) -> None:
        _check_positive(self.number, "Le numéro Matroska")

    def selector(self) -> str:
        return f"track:@{self.number}"


@dataclass(frozen=True)
class TrackByPosition(EditSelector):
    """n-ième piste d'un type donné (ex: deuxième piste audio)."""

    track_type: TrackType
    position: int

    def __post_init__(self) -> None:
        _check_positive(self.position, "La position")

    def selector(self) -> str:
        return f"track:{self.track_type}{self.position}"
