"""Modèles Pydantic de la configuration.

Exemple de fichier TOML accepté :

    binary_dir = "/opt/mkvtoolnix/bin"
    success_code = 0

    [logging]
    level = "DEBUG"
    file = "/var/log/mkvtoolnix_utils.log"
"""

from pathlib import Path
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Code de sortie historiquement comparé par le prédicat de succès.
DEFAULT_SUCCESS_CODE = 1
DEFAULT_ERROR_PREFIX = "Error:"
DEFAULT_WARNING_PREFIX = "Warning:"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class LoggingConfig(BaseModel):
    """Section [logging] de la configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file: Optional[Path] = None
    console: bool = False


class ToolnixConfig(BaseModel):
    """Configuration globale de l'exécution des outils MKVToolNix.

    Attributes:
        binary_dir: Répertoire contenant mkvmerge, mkvpropedit...
            Si None, les exécutables sont cherchés dans le PATH.
        working_directory: Répertoire de travail des processus.
        success_code: Code de sortie considéré comme un succès.
        error_prefix: Préfixe littéral des lignes d'erreur.
        warning_prefix: Préfixe littéral des lignes d'avertissement.
        env: Variables d'environnement ajoutées à os.environ.
        logging: Section de configuration du logging.
    """

    model_config = ConfigDict(extra="forbid")

    binary_dir: Optional[Path] = None
    working_directory: Optional[Path] = None
    success_code: int = DEFAULT_SUCCESS_CODE
    error_prefix: str = DEFAULT_ERROR_PREFIX
    warning_prefix: str = DEFAULT_WARNING_PREFIX
    env: Dict[str, str] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("error_prefix", "warning_prefix")
    @classmethod
    def prefix_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Le préfixe ne peut pas être vide")
        return value
