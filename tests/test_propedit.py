"""Tests pour le module propedit (commande mkvpropedit)."""

import pytest

from mkvtoolnix_utils.errors import MkvPropEditError
from mkvtoolnix_utils.language import ToolnixLanguage
from mkvtoolnix_utils.propedit import (
    AttachmentInfo,
    AttachmentSelector,
    MkvPropEditCommand,
    PropertyEdits,
    TrackByMatroskaNumber,
    TrackByNumber,
    TrackByPosition,
    TrackByUid,
    TrackType,
)


class TestSelecteurs:
    """Tests des sélecteurs --edit."""

    def test_track_by_number(self):
        assert TrackByNumber(2).command_args() == ["--edit", "track:2"]

    def test_track_by_uid(self):
        assert TrackByUid(123).command_args() == ["--edit", "track:=123"]

    def test_track_by_matroska_number(self):
        assert TrackByMatroskaNumber(3).selector() == "track:@3"

    def test_track_by_position(self):
        selector = TrackByPosition(TrackType.AUDIO, 2)
        assert selector.selector() == "track:a2"

    @pytest.mark.parametrize("factory", [
        lambda: TrackByNumber(0),
        lambda: TrackByMatroskaNumber(0),
        lambda: TrackByPosition(TrackType.VIDEO, 0),
    ])
    def test_numeros_invalides(self, factory):
        with pytest.raises(ValueError):
            factory()


class TestPropertyEdits:
    """Tests des modifications de propriétés."""

    def test_ordre_conserve(self):
        edits = PropertyEdits().set_language("eng").delete_name()
        assert edits.command_args() == [
            "--set", "language=eng", "--delete", "name",
        ]

    def test_langue_objet(self):
        language = ToolnixLanguage("German", "deu", "ger", "de")
        edits = PropertyEdits().set_language(language)
        assert edits.command_args() == ["--set", "language=deu"]

    def test_drapeaux(self):
        edits = (
            PropertyEdits()
            .set_default_flag()
            .set_forced_flag(False)
            .set_enabled_flag(True)
        )
        assert edits.command_args() == [
            "--set", "flag-default=1",
            "--set", "flag-forced=0",
            "--set", "flag-enabled=1",
        ]

    def test_add(self):
        edits = PropertyEdits().add("name", "x")
        assert edits.command_args() == ["--add", "name=x"]

    def test_nom_vide(self):
        with pytest.raises(ValueError):
            PropertyEdits().set(" ", "x")


class TestAttachments:
    """Tests des arguments de pièces jointes."""

    def test_selecteurs(self):
        assert str(AttachmentSelector.by_id(1)) == "1"
        assert str(AttachmentSelector.by_uid(42)) == "=42"
        assert str(AttachmentSelector.by_name("a.png")) == "name:a.png"
        assert (str(AttachmentSelector.by_mime_type("image/png"))
                == "mime-type:image/png")

    def test_selecteur_id_invalide(self):
        with pytest.raises(ValueError):
            AttachmentSelector.by_id(0)

    def test_egalite_des_selecteurs(self):
        assert AttachmentSelector.by_name("a") == AttachmentSelector("name:a")
        assert len({AttachmentSelector.by_id(1),
                    AttachmentSelector.by_id(1)}) == 1

    def test_info_vide(self):
        assert AttachmentInfo().command_args() == []


class TestMkvPropEditCommand:
    """Tests de la commande mkvpropedit complète."""

    def test_fichier_source_en_premier(self):
        command = MkvPropEditCommand("film.mkv").edit_info(
            lambda e: e.set_title("Titre")
        )
        assert command.command_args() == [
            "film.mkv", "--edit", "info", "--set", "title=Titre",
        ]

    def test_editions_multiples(self):
        command = (
            MkvPropEditCommand("film.mkv")
            .edit_track_by_number(
                2, lambda e: e.set_language("eng").delete_name()
            )
            .edit_track_by_uid(
                2132213123312, lambda e: e.set_name("Audiodescription")
            )
            .edit_track_by_position(
                TrackType.SUBTITLE, 1, lambda e: e.set_forced_flag()
            )
        )
        assert command.command_args() == [
            "film.mkv",
            "--edit", "track:2",
            "--set", "language=eng", "--delete", "name",
            "--edit", "track:=2132213123312",
            "--set", "name=Audiodescription",
            "--edit", "track:s1",
            "--set", "flag-forced=1",
        ]

    def test_edition_sans_modification(self):
        with pytest.raises(ValueError):
            MkvPropEditCommand("film.mkv").edit_track_by_number(1, lambda e: e)

    def test_pieces_jointes(self):
        command = (
            MkvPropEditCommand("film.mkv")
            .add_attachment(
                "image.png",
                AttachmentInfo(name="Couverture", mime_type="image/png"),
            )
            .replace_attachment_by_name("old.png", "new.png")
            .update_attachment_by_id(
                2, AttachmentInfo(description="Affiche")
            )
            .delete_attachment_by_mime_type("font/ttf")
        )
        assert command.command_args() == [
            "film.mkv",
            "--attachment-name", "Couverture",
            "--attachment-mime-type", "image/png",
            "--add-attachment", "image.png",
            "--replace-attachment", "name:old.png:new.png",
            "--attachment-description", "Affiche",
            "--update-attachment", "2",
            "--delete-attachment", "mime-type:font/ttf",
        ]

    def test_suppression_par_uid_et_id(self):
        command = (
            MkvPropEditCommand("film.mkv")
            .delete_attachment_by_uid(99)
            .delete_attachment_by_id(1)
        )
        assert command.command_args() == [
            "film.mkv",
            "--delete-attachment", "=99",
            "--delete-attachment", "1",
        ]

    def test_failure_error(self):
        assert MkvPropEditCommand.failure_error is MkvPropEditError

    def test_binaire(self):
        assert str(MkvPropEditCommand("a.mkv")) == "mkvpropedit a.mkv"
