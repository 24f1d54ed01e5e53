"""Commande mkvpropedit.

Example:
    Modifier des pistes et des pièces jointes sans remuxer :

        from mkvtoolnix_utils.propedit import (
            AttachmentInfo,
            MkvPropEditCommand,
        )

        (
            MkvPropEditCommand("film.mkv")
            .edit_track_by_number(
                2, lambda e: e.set_language("eng").delete_name()
            )
            .edit_track_by_uid(
                2132213123312, lambda e: e.set_name("Audiodescription")
            )
            .add_attachment(
                "image.png",
                AttachmentInfo(name="Couverture", mime_type="image/png"),
            )
            .delete_attachment_by_name("ancienne.png")
            .execute_and_print()
        )
"""

from pathlib import Path
from typing import Callable, List, Optional, Union

from mkvtoolnix_utils.commands.base import (CommandArgs, CommandExecutor,
                                            ToolnixBinary, ToolnixCommand)
from mkvtoolnix_utils.commands.builder import CommandBuilder
from mkvtoolnix_utils.errors.exceptions import MkvPropEditError
from mkvtoolnix_utils.propedit.attachments import (AddAttachment,
                                                   AttachmentInfo,
                                                   AttachmentSelector,
                                                   DeleteAttachment,
                                                   ReplaceAttachment,
                                                   UpdateAttachment)
from mkvtoolnix_utils.propedit.edits import PropertyEdits
from mkvtoolnix_utils.propedit.selectors import (EditSelector, InfoSelector,
                                                 TrackByMatroskaNumber,
                                                 TrackByNumber,
                                                 TrackByPosition, TrackByUid,
                                                 TrackType)

PathLike = Union[str, Path]
EditsConfigurator = Callable[[PropertyEdits], object]


class _PropertyEditAction(CommandArgs):
    """--edit sélecteur suivi des modifications."""

    def __init__(self, selector: EditSelector, edits: PropertyEdits) -> None:
        self.selector = selector
        self.edits = edits

    def command_args(self) -> List[str]:
        return (
            CommandBuilder()
            .with_command_args(self.selector)
            .with_command_args(self.edits)
            .build()
        )


class MkvPropEditCommand(ToolnixCommand):
    """Commande mkvpropedit : modifie un fichier Matroska en place.

    Les actions sont appliquées dans leur ordre d'ajout.
    """

    failure_error = MkvPropEditError

    def __init__(
        self,
        source_file: PathLike,
        executor: Optional[CommandExecutor] = None,
    ) -> None:
        super().__init__(ToolnixBinary.MKV_PROPEDIT, executor)
        self.source_file = Path(source_file)
        self.actions: List[CommandArgs] = []

    def edit(
        self, selector: EditSelector, configure: EditsConfigurator
    ) -> "MkvPropEditCommand":
        """Ajoute une édition de propriétés.

        Args:
            selector: Élément à éditer.
            configure: Callable recevant les PropertyEdits à remplir.

        Raises:
            ValueError: Si aucune modification n'a été déclarée.
        """
        edits = PropertyEdits()
        configure(edits)
        if not len(edits):
            raise ValueError(f"Aucune modification pour {selector.selector()}")
        self.actions.append(_PropertyEditAction(selector, edits))
        return self

    def edit_info(
        self, configure: EditsConfigurator
    ) -> "MkvPropEditCommand":
        return self.edit(InfoSelector(), configure)

    def edit_track_by_number(
        self, number: int, configure: EditsConfigurator
    ) -> "MkvPropEditCommand":
        return self.edit(TrackByNumber(number), configure)

    def edit_track_by_uid(
        self, uid: int, configure: EditsConfigurator
    ) -> "MkvPropEditCommand":
        return self.edit(TrackByUid(uid), configure)

    def edit_track_by_matroska_number(
        self, number: int, configure: EditsConfigurator
    ) -> "MkvPropEditCommand":
        return self.edit(TrackByMatroskaNumber(number), configure)

    def edit_track_by_position(
        self,
        track_type: TrackType,
        position: int,
        configure: EditsConfigurator,
    ) -> "MkvPropEditCommand":
        return self.edit(TrackByPosition(track_type, position), configure)

    # Pièces jointes

    def add_attachment(
        self, file: PathLike, info: Optional[AttachmentInfo] = None
    ) -> "MkvPropEditCommand":
        self.actions.append(
            AddAttachment(Path(file), info or AttachmentInfo())
        )
        return self

    def replace_attachment(
        self,
        selector: AttachmentSelector,
        file: PathLike,
        info: Optional[AttachmentInfo] = None,
    ) -> "MkvPropEditCommand":
        self.actions.append(
            ReplaceAttachment(selector, Path(file), info or AttachmentInfo())
        )
        return self

    def replace_attachment_by_id(
        self, attachment_id: int, file: PathLike,
        info: Optional[AttachmentInfo] = None,
    ) -> "MkvPropEditCommand":
        return self.replace_attachment(
            AttachmentSelector.by_id(attachment_id), file, info
        )

    def replace_attachment_by_name(
        self, name: str, file: PathLike,
        info: Optional[AttachmentInfo] = None,
    ) -> "MkvPropEditCommand":
        return self.replace_attachment(
            AttachmentSelector.by_name(name), file, info
        )

    def update_attachment(
        self, selector: AttachmentSelector, info: AttachmentInfo
    ) -> "MkvPropEditCommand":
        self.actions.append(UpdateAttachment(selector, info))
        return self

    def update_attachment_by_id(
        self, attachment_id: int, info: AttachmentInfo
    ) -> "MkvPropEditCommand":
        return self.update_attachment(
            AttachmentSelector.by_id(attachment_id), info
        )

    def update_attachment_by_uid(
        self, uid: int, info: AttachmentInfo
    ) -> "MkvPropEditCommand":
        return self.update_attachment(AttachmentSelector.by_uid(uid), info)

    def update_attachment_by_name(
        self, name: str, info: AttachmentInfo
    ) -> "MkvPropEditCommand":
        return self.update_attachment(AttachmentSelector.by_name(name), info)

    def delete_attachment(
        self, selector: AttachmentSelector
    ) -> "MkvPropEditCommand":
        self.actions.append(DeleteAttachment(selector))
        return self

    def delete_attachment_by_id(
        self, attachment_id: int
    ) -> "MkvPropEditCommand":
        return self.delete_attachment(AttachmentSelector.by_id(attachment_id))

    def delete_attachment_by_uid(self, uid: int) -> "MkvPropEditCommand":
        return self.delete_attachment(AttachmentSelector.by_uid(uid))

    def delete_attachment_by_name(self, name: str) -> "MkvPropEditCommand":
        return self.delete_attachment(AttachmentSelector.by_name(name))

    def delete_attachment_by_mime_type(
        self, mime_type: str
    ) -> "MkvPropEditCommand":
        return self.delete_attachment(
            AttachmentSelector.by_mime_type(mime_type)
        )

    def command_args(self) -> List[str]:
        builder = CommandBuilder().with_args([str(self.source_file)])
        for action in self.actions:
            builder.with_command_args(action)
        return builder.build()
