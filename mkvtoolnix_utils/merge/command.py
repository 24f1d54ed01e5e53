"""Commande mkvmerge.

Example:
    Conserver uniquement l'audio français et retirer les sous-titres :

        from mkvtoolnix_utils.merge import MkvMergeCommand

        command = MkvMergeCommand("sortie.mkv")
        command.global_options.title = "Mon film"
        command.add_input_file(
            "entree.mkv",
            lambda f: (
                f.audio_tracks.include(lambda t: t.add_by_language("fre")),
                f.subtitle_tracks.exclude_all(),
            ),
        )
        command.execute()
"""

from pathlib import Path
from typing import Callable, List, Optional, Union

from mkvtoolnix_utils.commands.base import (CommandArgs, CommandExecutor,
                                            ToolnixBinary, ToolnixCommand)
from mkvtoolnix_utils.commands.builder import CommandBuilder
from mkvtoolnix_utils.errors.exceptions import MkvMergeError
from mkvtoolnix_utils.language.models import ToolnixLanguage
from mkvtoolnix_utils.merge.tracks import TracksSelection

PathLike = Union[str, Path]


class GlobalOptions(CommandArgs):
    """Options globales d'une commande mkvmerge.

    Attributes:
        verbose: Ajoute --verbose.
        webm: Produit un fichier WebM (--webm).
        title: Titre du fichier de sortie.
        default_language: Langue par défaut des pistes sans langue.
    """

    def __init__(self) -> None:
        self.verbose = False
        self.webm = False
        self.title: Optional[str] = None
        self.default_language: Optional[Union[ToolnixLanguage, str]] = None

    def command_args(self) -> List[str]:
        language = self.default_language
        if isinstance(language, ToolnixLanguage):
            language = language.iso639_3
        return (
            CommandBuilder()
            .with_flag_if("--verbose", self.verbose)
            .with_flag_if("--webm", self.webm)
            .with_option_if("--title", self.title)
            .with_option_if("--default-language", language)
            .build()
        )


class InputFile(CommandArgs):
    """Fichier d'entrée et sélection de ses pistes.

    Les options de sélection précèdent le chemin du fichier.
    """

    def __init__(self, file: PathLike) -> None:
        self.file = Path(file)
        self.video_tracks = TracksSelection("--video-tracks", "--no-video")
        self.audio_tracks = TracksSelection("--audio-tracks", "--no-audio")
        self.subtitle_tracks = TracksSelection(
            "--subtitle-tracks", "--no-subtitles"
        )
        self.button_tracks = TracksSelection("--button-tracks", "--no-buttons")
        self.track_tags = TracksSelection("--track-tags", "--no-track-tags")

    def command_args(self) -> List[str]:
        return (
            CommandBuilder()
            .with_command_args(self.video_tracks)
            .with_command_args(self.audio_tracks)
            .with_command_args(self.subtitle_tracks)
            .with_command_args(self.button_tracks)
            .with_command_args(self.track_tags)
            .with_args([str(self.file)])
            .build()
        )


class MkvMergeCommand(ToolnixCommand):
    """Commande mkvmerge : assemble des fichiers d'entrée en un
    fichier Matroska.
    """

    failure_error = MkvMergeError

    def __init__(
        self,
        output_file: PathLike,
        executor: Optional[CommandExecutor] = None,
    ) -> None:
        super().__init__(ToolnixBinary.MKV_MERGE, executor)
        self.output_file = Path(output_file)
        self.global_options = GlobalOptions()
        self.input_files: List[InputFile] = []

    def add_input_file(
        self,
        file: PathLike,
        configure: Optional[Callable[[InputFile], object]] = None,
    ) -> "MkvMergeCommand":
        """Ajoute un fichier d'entrée.

        Args:
            file: Chemin du fichier.
            configure: Callable recevant l'InputFile pour régler la
                sélection de ses pistes.

        Returns:
            L'instance courante pour le chaînage.
        """
        input_file = InputFile(file)
        if configure is not None:
            configure(input_file)
        self.input_files.append(input_file)
        return self

    def command_args(self) -> List[str]:
        builder = (
            CommandBuilder()
            .with_command_args(self.global_options)
            .with_option("--output", str(self.output_file.absolute()))
        )
        for input_file in self.input_files:
            builder.with_command_args(input_file)
        return builder.build()
