"""Ajout, remplacement, mise à jour et suppression de pièces jointes."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from mkvtoolnix_utils.commands.base import CommandArgs
from mkvtoolnix_utils.commands.builder import CommandBuilder


@dataclass
class AttachmentInfo(CommandArgs):
    """Métadonnées appliquées à l'opération qui suit.

    Attributes:
        name: Nom de la pièce jointe.
        mime_type: Type MIME.
        description: Description libre.
    """

    name: Optional[str] = None
    mime_type: Optional[str] = None
    description: Optional[str] = None

    def command_args(self) -> List[str]:
        return (
            CommandBuilder()
            .with_option_if("--attachment-name", self.name)
            .with_option_if("--attachment-mime-type", self.mime_type)
            .with_option_if("--attachment-description", self.description)
            .build()
        )


class AttachmentSelector:
    """Désignation d'une pièce jointe existante."""

    def __init__(self, selector: str) -> None:
        self._selector = selector

    @classmethod
    def by_id(cls, attachment_id: int) -> "AttachmentSelector":
        if attachment_id < 1:
            raise ValueError(
                f"Identifiant de pièce jointe invalide : {attachment_id}"
            )
        return cls(str(attachment_id))

    @classmethod
    def by_uid(cls, uid: int) -> "AttachmentSelector":
        return cls(f"={uid}")

    @classmethod
    def by_name(cls, name: str) -> "AttachmentSelector":
        return cls(f"name:{name}")

    @classmethod
    def by_mime_type(cls, mime_type: str) -> "AttachmentSelector":
        return cls(f"mime-type:{mime_type}")

    def __str__(self) -> str:
        return self._selector

    def __eq__(self, other: object) -> bool:
        return (isinstance(other, AttachmentSelector)
                and other._selector == self._selector)

    def __hash__(self) -> int:
        return hash(self._selector)


class AddAttachment(CommandArgs):

    def __init__(self, file: Path, info: AttachmentInfo) -> None:
        self.file = file
        self.info = info

    def command_args(self) -> List[str]:
        return (
            CommandBuilder()
            .with_command_args(self.info)
            .with_option("--add-attachment", str(self.file))
            .build()
        )


class ReplaceAttachment(CommandArgs):

    def __init__(
        self, selector: AttachmentSelector, file: Path, info: AttachmentInfo
    ) -> None:
        self.selector = selector
        self.file = file
        self.info = info

    def command_args(self) -> List[str]:
        return (
            CommandBuilder()
            .with_command_args(self.info)
            .with_option("--replace-attachment", f"{self.selector}:{self.file}")
            .build()
        )


class UpdateAttachment(CommandArgs):

    def __init__(
        self, selector: AttachmentSelector, info: AttachmentInfo
    ) -> None:
        self.selector = selector
        self.info = info

    def command_args(self) -> List[str]:
        return (
            CommandBuilder()
            .with_command_args(self.info)
            .with_option("--update-attachment", str(self.selector))
            .build()
        )


class DeleteAttachment(CommandArgs):

    def __init__(self, selector: AttachmentSelector) -> None:
        self.selector = selector

    def command_args(self) -> List[str]:
        return ["--delete-attachment", str(self.selector)]
