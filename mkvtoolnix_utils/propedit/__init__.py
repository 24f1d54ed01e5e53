"""Module de la commande mkvpropedit."""

from mkvtoolnix_utils.propedit.attachments import (
    AttachmentInfo,
    AttachmentSelector,
)
from mkvtoolnix_utils.propedit.command import MkvPropEditCommand
from mkvtoolnix_utils.propedit.edits import PropertyEdits
from mkvtoolnix_utils.propedit.selectors import (
    EditSelector,
    InfoSelector,
    TrackByMatroskaNumber,
    TrackByNumber,
    TrackByPosition,
    TrackByUid,
    TrackType,
)

__all__ = [
    "AttachmentInfo",
    "AttachmentSelector",
    "MkvPropEditCommand",
    "PropertyEdits",
    "EditSelector",
    "InfoSelector",
    "TrackByMatroskaNumber",
    "TrackByNumber",
    "TrackByPosition",
    "TrackByUid",
    "TrackType",
]
