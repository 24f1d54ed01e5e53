"""Sélection des pistes d'un fichier d'entrée mkvmerge.

Une sélection est soit une inclusion (seules les pistes listées sont
conservées), soit une exclusion (les pistes listées sont retirées,
préfixe "!"). Inclure une liste vide revient à tout exclure.

Example:
    >>> selection = TracksSelection("--audio-tracks", "--no-audio")
    >>> _ = selection.include(lambda t: t.add_by_id(1).add_by_language("fre"))
    >>> selection.command_args()
    ['--audio-tracks', '1,fre']
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

from mkvtoolnix_utils.commands.base import CommandArgs
from mkvtoolnix_utils.language.models import ToolnixLanguage


class Track(ABC):
    """Piste désignée dans une sélection."""

    @abstractmethod
    def selector(self) -> str:
        """Fragment inséré dans la liste séparée par des virgules."""
        pass


@dataclass(frozen=True)
class TrackId(Track):
    """Piste désignée par son identifiant mkvmerge."""

    id: int

    def selector(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class TrackLanguage(Track):
    """Pistes désignées par leur langue."""

    language: Union[ToolnixLanguage, str]

    def selector(self) -> str:
        if isinstance(self.language, ToolnixLanguage):
            return self.language.selector_code
        return self.language


class Tracks:
    """Liste ordonnée des pistes d'une sélection."""

    def __init__(self) -> None:
        self.tracks: List[Track] = []

    def add_by_id(self, track_id: int) -> "Tracks":
        if track_id < 0:
            raise ValueError(f"Identifiant de piste invalide : {track_id}")
        self.tracks.append(TrackId(track_id))
        return self

    def add_by_language(
        self, language: Union[ToolnixLanguage, str]
    ) -> "Tracks":
        self.tracks.append(TrackLanguage(language))
        return self

    def clear(self) -> None:
        self.tracks.clear()

    def __len__(self) -> int:
        return len(self.tracks)


class SelectionMode(Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


class TracksSelection(CommandArgs):
    """Sélection d'un type de pistes d'un fichier d'entrée.

    Par défaut rien n'est exclu : l'option n'apparaît pas.

    Attributes:
        type_option: Option de sélection (ex: '--audio-tracks').
        exclude_all_option: Option d'exclusion totale (ex: '--no-audio').
        mode: Inclusion ou exclusion.
        tracks: Pistes listées.
    """

    def __init__(self, type_option: str, exclude_all_option: str) -> None:
        self.type_option = type_option
        self.exclude_all_option = exclude_all_option
        self.mode = SelectionMode.EXCLUDE
        self.tracks = Tracks()

    def exclude_all(self) -> "TracksSelection":
        """N'inclut aucune piste de ce type."""
        self.tracks.clear()
        self.mode = SelectionMode.INCLUDE
        return self

    def include_all(self) -> "TracksSelection":
        """N'exclut aucune piste de ce type."""
        self.tracks.clear()
        self.mode = SelectionMode.EXCLUDE
        return self

    def include(
        self, configure: Optional[Callable[[Tracks], object]] = None
    ) -> "TracksSelection":
        """Repart d'une sélection vide et n'inclut que les pistes
        ajoutées par configure.
        """
        self.exclude_all()
        if configure is not None:
            configure(self.tracks)
        return self

    def exclude(
        self, configure: Optional[Callable[[Tracks], object]] = None
    ) -> "TracksSelection":
        """Repart de toutes les pistes et exclut celles ajoutées par
        configure.
        """
        self.include_all()
        if configure is not None:
            configure(self.tracks)
        return self

    def command_args(self) -> List[str]:
        if not self.tracks.tracks:
            if self.mode == SelectionMode.INCLUDE:
                return [self.exclude_all_option]
            return []
        prefix = "!" if self.mode == SelectionMode.EXCLUDE else ""
        selectors = ",".join(track.selector() for track in self.tracks.tracks)
        return [self.type_option, f"{prefix}{selectors}"]
