"""Tests pour le module logging."""

import uuid

from mkvtoolnix_utils.config import LoggingConfig
from mkvtoolnix_utils.logging import FileLogger, Logger


def _unique_log(tmp_path):
    # Un logger Python par chemin : chaque test utilise un fichier neuf.
    return tmp_path / f"{uuid.uuid4().hex}.log"


class TestFileLogger:
    """Tests pour FileLogger."""

    def test_est_un_logger(self, tmp_path):
        logger = FileLogger(str(_unique_log(tmp_path)))
        assert isinstance(logger, Logger)

    def test_ecrit_les_trois_niveaux(self, tmp_path):
        log_file = _unique_log(tmp_path)
        logger = FileLogger(str(log_file))

        logger.log_info("Exécution : mkvmerge --version")
        logger.log_warning("WARNING: track 2 has no language")
        logger.log_error("ERROR: fichier introuvable")

        content = log_file.read_text(encoding="utf-8")
        assert "INFO - Exécution : mkvmerge --version" in content
        assert "WARNING - WARNING: track 2 has no language" in content
        assert "ERROR - ERROR: fichier introuvable" in content

    def test_cree_le_repertoire(self, tmp_path):
        log_file = tmp_path / "logs" / "sous" / "app.log"
        FileLogger(str(log_file)).log_info("ok")
        assert log_file.exists()

    def test_niveau_configure(self, tmp_path):
        log_file = _unique_log(tmp_path)
        logger = FileLogger(str(log_file), LoggingConfig(level="ERROR"))

        logger.log_info("ignoré")
        logger.log_error("retenu")

        content = log_file.read_text(encoding="utf-8")
        assert "ignoré" not in content
        assert "retenu" in content

    def test_pas_de_propagation(self, tmp_path):
        logger = FileLogger(str(_unique_log(tmp_path)))
        assert logger.logger.propagate is False

    def test_handlers_non_dupliques(self, tmp_path):
        log_file = str(_unique_log(tmp_path))
        first = FileLogger(log_file)
        second = FileLogger(log_file)
        assert first.logger is second.logger
        assert len(second.logger.handlers) == 1

    def test_sortie_console(self, tmp_path):
        logger = FileLogger(str(_unique_log(tmp_path)), console_output=True)
        assert len(logger.logger.handlers) == 2


class TestFromConfig:
    """Tests de FileLogger.from_config."""

    def test_sans_fichier(self):
        assert FileLogger.from_config(LoggingConfig()) is None

    def test_avec_fichier(self, tmp_path):
        log_file = _unique_log(tmp_path)
        logger = FileLogger.from_config(LoggingConfig(file=log_file))
        assert isinstance(logger, FileLogger)
        assert logger.log_file == str(log_file)
