"""Formateurs pour l'affichage des commandes et de leur sortie.

Ce module fournit une hiérarchie de formateurs permettant d'afficher
les messages différemment selon le contexte (fichier de log ou
console) et la sévérité des lignes produites par l'outil.

Classes :
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Texte brut (logs fichier).
    AnsiCommandFormatter : Codes ANSI colorés pour la console.

Example :
    Affichage coloré de la sortie d'une commande :

        from mkvtoolnix_utils.commands import AnsiCommandFormatter

        command.execute_and_print(formatter=AnsiCommandFormatter())

Note :
    AnsiCommandFormatter vérifie automatiquement si la sortie est
    un terminal (TTY) avant d'émettre des codes ANSI, évitant
    ainsi de polluer les pipes ou les redirections.
"""

import shlex
import sys
from abc import ABC, abstractmethod
from typing import List

from mkvtoolnix_utils.results.line import ClassifiedLine, Severity


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages de commande."""

    @abstractmethod
    def format_start(self, command: List[str]) -> str:
        """Formate le message de lancement d'une commande.

        Args:
            command: Ligne de commande complète.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_line(self, line: ClassifiedLine) -> str:
        """Formate une ligne de sortie classifiée.

        Args:
            line: Ligne produite par l'outil.

        Returns:
            Ligne formatée prête à l'affichage.
        """
        pass

    @abstractmethod
    def format_exit_code(self, exit_code: int, success: bool) -> str:
        """Formate le code de sortie.

        Args:
            exit_code: Code de sortie du processus.
            success: True si le code est le code de succès.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut pour les logs fichier.

    N'utilise aucun code ANSI : compatible avec les fichiers de log,
    les outils grep et les éditeurs de texte.

    Example :
        Exécution : mkvmerge --output out.mkv in.mkv
        WARNING: track 2 has no language
        Code de sortie : 1
    """

    def format_start(self, command: List[str]) -> str:
        return f"Exécution : {shlex.join(command)}"

    def format_line(self, line: ClassifiedLine) -> str:
        return str(line)

    def format_exit_code(self, exit_code: int, success: bool) -> str:
        return f"Code de sortie : {exit_code}"


class AnsiCommandFormatter(CommandFormatter):
    """Formateur ANSI coloré pour la sortie console.

    Les erreurs sont en rouge gras, les avertissements en jaune ;
    les lignes INFO ne sont pas stylisées pour conserver la lisibilité
    de la sortie de l'outil.

    Styles ANSI :
        ERROR   → \\033[1;31m (rouge gras)
        WARNING → \\033[0;33m (jaune)
        start   → \\033[0;32m (vert)
        reset   → \\033[0m
    """

    RESET = "\033[0m"
    ERROR_STYLE = "\033[1;31m"    # Rouge gras
    WARNING_STYLE = "\033[0;33m"  # Jaune
    START_STYLE = "\033[0;32m"    # Vert

    _STYLES = {
        Severity.ERROR: ERROR_STYLE,
        Severity.WARNING: WARNING_STYLE,
    }

    def _is_tty(self) -> bool:
        """Vérifie si stdout est un terminal interactif (TTY)."""
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def _apply_style(self, text: str, style: str) -> str:
        if not self._is_tty():
            return text
        return f"{style}{text}{self.RESET}"

    def format_start(self, command: List[str]) -> str:
        return self._apply_style(
            f"Exécution : {shlex.join(command)}", self.START_STYLE
        )

    def format_line(self, line: ClassifiedLine) -> str:
        """Colore la ligne selon sa sévérité (INFO inchangée)."""
        style = self._STYLES.get(line.severity)
        if style is None:
            return str(line)
        return self._apply_style(str(line), style)

    def format_exit_code(self, exit_code: int, success: bool) -> str:
        text = f"Code de sortie : {exit_code}"
        if success:
            return text
        return self._apply_style(text, self.ERROR_STYLE)
