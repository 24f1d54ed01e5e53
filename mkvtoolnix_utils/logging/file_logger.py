"""Implémentation concrète du logger avec fichier."""

import logging
import os
from typing import Optional

from mkvtoolnix_utils.config.models import LoggingConfig
from mkvtoolnix_utils.logging.base import Logger


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Support optionnel de la sortie console
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[LoggingConfig] = None,
        console_output: Optional[bool] = None
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            config: Section logging de la configuration (niveau, format)
            console_output: Activer la sortie console en plus du fichier.
                Si None, la valeur de config.console est utilisée.
        """
        self.log_file = log_file
        config = config or LoggingConfig()
        if console_output is None:
            console_output = config.console

        # Créer le répertoire de logs si nécessaire
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        log_level = getattr(logging, config.level, logging.INFO)

        self.logger = logging.getLogger(f"mkvtoolnix_utils:{log_file}")
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            formatter = logging.Formatter(config.format)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    @classmethod
    def from_config(cls, config: LoggingConfig) -> Optional["FileLogger"]:
        """Crée un FileLogger si la configuration désigne un fichier.

        Args:
            config: Section logging de la configuration.

        Returns:
            Un FileLogger, ou None si aucun fichier n'est configuré.
        """
        if not config.file:
            return None
        return cls(str(config.file), config=config)

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        if self.handler:
            self.handler.flush()

    def log_info(self, message: str) -> None:
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        self.logger.error(message)
        self._flush()
