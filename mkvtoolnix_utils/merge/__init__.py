"""Module de la commande mkvmerge."""

from mkvtoolnix_utils.merge.command import (
    GlobalOptions,
    InputFile,
    MkvMergeCommand,
)
from mkvtoolnix_utils.merge.tracks import (
    SelectionMode,
    Track,
    TrackId,
    TrackLanguage,
    Tracks,
    TracksSelection,
)

__all__ = [
    "GlobalOptions",
    "InputFile",
    "MkvMergeCommand",
    "SelectionMode",
    "Track",
    "TrackId",
    "TrackLanguage",
    "Tracks",
    "TracksSelection",
]
