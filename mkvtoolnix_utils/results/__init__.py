"""Module des résultats de commandes.

Classes disponibles :
    Severity : Sévérité d'une ligne de sortie.
    ClassifiedLine : Ligne de sortie classifiée.
    CachedLineSequence : Sortie d'un processus, itérable plusieurs fois.
    CommandResult : Contrat commun des résultats.
    LazyCommandResult : Résultat attaché au processus en cours.
    SyncCommandResult : Résultat figé.
"""

from mkvtoolnix_utils.results.line import (
    DEFAULT_SEVERITY_PREFIXES,
    ClassifiedLine,
    Severity,
    build_prefix_table,
    classify,
    errors,
    has_errors,
    has_info,
    has_warnings,
    infos,
    warnings,
)
from mkvtoolnix_utils.results.sequence import CachedLineSequence
from mkvtoolnix_utils.results.result import (
    CommandResult,
    LazyCommandResult,
    SyncCommandResult,
)

__all__ = [
    # Lignes
    "DEFAULT_SEVERITY_PREFIXES",
    "ClassifiedLine",
    "Severity",
    "build_prefix_table",
    "classify",
    "errors",
    "warnings",
    "infos",
    "has_errors",
    "has_warnings",
    "has_info",
    # Séquence
    "CachedLineSequence",
    # Résultats
    "CommandResult",
    "LazyCommandResult",
    "SyncCommandResult",
]
