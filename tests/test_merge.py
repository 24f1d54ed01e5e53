"""Tests pour le module merge (commande mkvmerge)."""

from pathlib import Path

import pytest

from mkvtoolnix_utils.errors import MkvMergeError
from mkvtoolnix_utils.language import ToolnixLanguage
from mkvtoolnix_utils.merge import MkvMergeCommand
from mkvtoolnix_utils.merge.command import GlobalOptions, InputFile
from mkvtoolnix_utils.merge.tracks import TracksSelection


FRENCH = ToolnixLanguage("French", "fra", "fre", "fr")


class TestTracksSelection:
    """Tests des sélections de pistes."""

    def setup_method(self):
        self.selection = TracksSelection("--audio-tracks", "--no-audio")

    def test_par_defaut_aucun_argument(self):
        assert self.selection.command_args() == []

    def test_exclude_all(self):
        self.selection.exclude_all()
        assert self.selection.command_args() == ["--no-audio"]

    def test_include_vide_exclut_tout(self):
        self.selection.include()
        assert self.selection.command_args() == ["--no-audio"]

    def test_include_liste(self):
        self.selection.include(lambda t: t.add_by_id(1).add_by_language("fre"))
        assert self.selection.command_args() == ["--audio-tracks", "1,fre"]

    def test_exclude_liste_prefixee(self):
        self.selection.exclude(lambda t: t.add_by_id(2).add_by_id(3))
        assert self.selection.command_args() == ["--audio-tracks", "!2,3"]

    def test_include_all_annule_la_selection(self):
        self.selection.include(lambda t: t.add_by_id(1))
        self.selection.include_all()
        assert self.selection.command_args() == []

    def test_langue_objet_utilise_code_de_selection(self):
        self.selection.include(lambda t: t.add_by_language(FRENCH))
        assert self.selection.command_args() == ["--audio-tracks", "fre"]

    def test_identifiant_negatif(self):
        with pytest.raises(ValueError):
            self.selection.include(lambda t: t.add_by_id(-1))


class TestGlobalOptions:
    """Tests des options globales."""

    def test_vide(self):
        assert GlobalOptions().command_args() == []

    def test_toutes_options(self):
        options = GlobalOptions()
        options.verbose = True
        options.webm = True
        options.title = "Mon film"
        options.default_language = FRENCH
        assert options.command_args() == [
            "--verbose", "--webm",
            "--title", "Mon film",
            "--default-language", "fra",
        ]


class TestInputFile:
    """Tests des fichiers d'entrée."""

    def test_chemin_seul(self):
        assert InputFile("entree.mkv").command_args() == ["entree.mkv"]

    def test_options_video_et_audio_distinctes(self):
        input_file = InputFile("entree.mkv")
        input_file.video_tracks.exclude_all()
        input_file.audio_tracks.include(lambda t: t.add_by_id(1))
        assert input_file.command_args() == [
            "--no-video",
            "--audio-tracks", "1",
            "entree.mkv",
        ]

    def test_sous_titres_boutons_et_tags(self):
        input_file = InputFile("entree.mkv")
        input_file.subtitle_tracks.exclude_all()
        input_file.button_tracks.exclude_all()
        input_file.track_tags.exclude(lambda t: t.add_by_id(4))
        assert input_file.command_args() == [
            "--no-subtitles", "--no-buttons",
            "--track-tags", "!4",
            "entree.mkv",
        ]


class TestMkvMergeCommand:
    """Tests de la commande mkvmerge complète."""

    def test_ordre_des_arguments(self):
        command = MkvMergeCommand("sortie.mkv")
        command.global_options.title = "Titre"
        command.add_input_file(
            "a.mkv", lambda f: f.subtitle_tracks.exclude_all()
        )
        command.add_input_file("b.mkv")

        assert command.command_args() == [
            "--title", "Titre",
            "--output", str(Path("sortie.mkv").absolute()),
            "--no-subtitles", "a.mkv",
            "b.mkv",
        ]

    def test_add_input_file_chainable(self):
        command = MkvMergeCommand("sortie.mkv")
        assert command.add_input_file("a.mkv") is command
        assert len(command.input_files) == 1

    def test_failure_error(self):
        assert MkvMergeCommand.failure_error is MkvMergeError

    def test_str(self):
        command = MkvMergeCommand("/tmp/sortie.mkv")
        assert str(command) == "mkvmerge --output /tmp/sortie.mkv"
