"""Classification des lignes de sortie des outils MKVToolNix.

mkvmerge et mkvpropedit signalent leurs problèmes par un préfixe
littéral en début de ligne ("Error:" ou "Warning:"). Toute autre
ligne est informative.

Example:
    >>> classify("Warning: track 2 has no language\\n")
    ClassifiedLine(message='track 2 has no language', severity=...)
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Iterator, Mapping

from mkvtoolnix_utils.config.models import (
    DEFAULT_ERROR_PREFIX,
    DEFAULT_WARNING_PREFIX,
)


class Severity(StrEnum):
    """Sévérité d'une ligne de sortie."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# L'ordre compte : les erreurs sont testées avant les avertissements.
DEFAULT_SEVERITY_PREFIXES: Mapping[str, Severity] = {
    DEFAULT_ERROR_PREFIX: Severity.ERROR,
    DEFAULT_WARNING_PREFIX: Severity.WARNING,
}


@dataclass(frozen=True)
class ClassifiedLine:
    """Ligne de sortie d'un processus, associée à sa sévérité.

    Attributes:
        message: Texte de la ligne, sans fin de ligne ni préfixe
            de sévérité.
        severity: Sévérité calculée une seule fois à la lecture.
    """

    message: str
    severity: Severity

    def __str__(self) -> str:
        return f"{self.severity}: {self.message}"


def build_prefix_table(
    error_prefix: str = DEFAULT_ERROR_PREFIX,
    warning_prefix: str = DEFAULT_WARNING_PREFIX,
) -> Mapping[str, Severity]:
    """Construit la table préfixe -> sévérité.

    Args:
        error_prefix: Préfixe littéral des lignes d'erreur.
        warning_prefix: Préfixe littéral des lignes d'avertissement.

    Returns:
        Table ordonnée, erreurs en premier.
    """
    return {
        error_prefix: Severity.ERROR,
        warning_prefix: Severity.WARNING,
    }


def classify(
    raw_line: str,
    prefixes: Mapping[str, Severity] = DEFAULT_SEVERITY_PREFIXES,
) -> ClassifiedLine:
    """Classe une ligne brute selon son préfixe.

    Fonction totale et déterministe : une ligne sans préfixe connu
    est INFO. Les préfixes sont comparés littéralement.

    Args:
        raw_line: Ligne lue sur la sortie du processus.
        prefixes: Table préfixe -> sévérité.

    Returns:
        La ligne classifiée.
    """
    line = raw_line.rstrip("\r\n")
    for prefix, severity in prefixes.items():
        if line.startswith(prefix):
            return ClassifiedLine(line[len(prefix):].lstrip(), severity)
    return ClassifiedLine(line, Severity.INFO)


def _of(lines: Iterable[ClassifiedLine],
        severity: Severity) -> Iterator[ClassifiedLine]:
    return (line for line in lines if line.severity == severity)


def errors(lines: Iterable[ClassifiedLine]) -> Iterator[ClassifiedLine]:
    """Filtre les lignes ERROR."""
    return _of(lines, Severity.ERROR)


def warnings(lines: Iterable[ClassifiedLine]) -> Iterator[ClassifiedLine]:
    """Filtre les lignes WARNING."""
    return _of(lines, Severity.WARNING)


def infos(lines: Iterable[ClassifiedLine]) -> Iterator[ClassifiedLine]:
    """Filtre les lignes INFO."""
    return _of(lines, Severity.INFO)


def has_errors(lines: Iterable[ClassifiedLine]) -> bool:
    return any(errors(lines))


def has_warnings(lines: Iterable[ClassifiedLine]) -> bool:
    return any(warnings(lines))


def has_info(lines: Iterable[ClassifiedLine]) -> bool:
    return any(infos(lines))
