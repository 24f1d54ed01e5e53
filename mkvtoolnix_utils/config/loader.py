"""Fonctions de chargement de configuration."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from mkvtoolnix_utils.config.models import ToolnixConfig
from mkvtoolnix_utils.errors.exceptions import ConfigurationError

M = TypeVar("M", bound=BaseModel)


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de configuration.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: Type[M] = ToolnixConfig
    ) -> M:
        """
        Charge et valide un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe Pydantic BaseModel de validation

        Returns:
            Instance du schema

        Raises:
            ConfigurationError: Fichier absent, format non supporté,
                contenu illisible ou invalide
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de configuration depuis fichiers.

    Supporte les formats TOML et JSON, détectés automatiquement
    par l'extension du fichier, puis valide le contenu via un
    modèle Pydantic.
    """

    def load(
        self,
        config_path: Union[str, Path],
        schema: Type[M] = ToolnixConfig
    ) -> M:
        raw_config = self._read(Path(config_path))
        return self._validate_with_schema(raw_config, schema)

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        """Lit le fichier brut selon son extension."""
        if not path.exists():
            raise ConfigurationError(
                f"Fichier de configuration non trouvé: {path}"
            )

        suffix = path.suffix.lower()
        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    return tomllib.load(f)
            if suffix == ".json":
                with open(path, "r", encoding="utf-8") as f:
                    return json.load(f)
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Fichier de configuration illisible {path}: {e}"
            ) from e

        raise ConfigurationError(
            f"Extension non supportée: {suffix}. "
            "Utilisez .toml ou .json"
        )

    @staticmethod
    def _validate_with_schema(
        data: Dict[str, Any], schema: Type[M]
    ) -> M:
        """Valide un dict via un modèle Pydantic.

        Raises:
            TypeError: Si schema n'est pas un BaseModel.
            ConfigurationError: Si la validation échoue.
        """
        if not (
            isinstance(schema, type)
            and issubclass(schema, BaseModel)
        ):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration invalide: {e}"
            ) from e


_default_loader = FileConfigLoader()


def load_config(
    config_path: Optional[Union[str, Path]] = None
) -> ToolnixConfig:
    """
    Charge la configuration (fonction utilitaire).

    Args:
        config_path: Chemin vers le fichier de configuration. Si None,
            la configuration par défaut est retournée.

    Returns:
        Configuration validée

    Raises:
        ConfigurationError: Si le fichier est absent ou invalide
    """
    if config_path is None:
        return ToolnixConfig()
    return _default_loader.load(config_path)
