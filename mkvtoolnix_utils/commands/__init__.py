"""Module d'exécution des commandes MKVToolNix.

Classes disponibles :
    CommandArgs : Élément convertible en arguments.
    ToolnixBinary : Exécutables de la suite MKVToolNix.
    ToolnixCommand : Commande exécutable.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    CommandBuilder : Constructeur fluent d'arguments.
    ToolnixCommandExecutor : Exécuteur concret via subprocess.
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Formatage texte brut (logs fichier).
    AnsiCommandFormatter : Formatage ANSI coloré (console).
"""

from mkvtoolnix_utils.commands.base import (
    CommandArgs,
    CommandExecutor,
    ToolnixBinary,
    ToolnixCommand,
)
from mkvtoolnix_utils.commands.builder import CommandBuilder
from mkvtoolnix_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
    AnsiCommandFormatter,
)
from mkvtoolnix_utils.commands.runner import ToolnixCommandExecutor

__all__ = [
    # Commandes
    "CommandArgs",
    "ToolnixBinary",
    "ToolnixCommand",
    # Interface abstraite
    "CommandExecutor",
    # Constructeur
    "CommandBuilder",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    # Implémentation
    "ToolnixCommandExecutor",
]
