"""Constructeur fluent pour assembler des arguments MKVToolNix.

Les outils MKVToolNix attendent les options et leurs valeurs en
arguments séparés ("--title", "Mon film"), et certaines options
composées ("--edit", "track:2").

Example:
    Arguments d'une édition mkvpropedit :

        from mkvtoolnix_utils.commands import CommandBuilder

        args = (
            CommandBuilder()
            .with_args(["film.mkv"])
            .with_option("--edit", "track:2")
            .with_option("--set", "language=fre")
            .with_flag("--verbose")
            .build()
        )
        # Résultat : ["film.mkv", "--edit", "track:2",
        #             "--set", "language=fre", "--verbose"]
"""

from typing import List, Optional

from mkvtoolnix_utils.commands.base import CommandArgs


class CommandBuilder:
    """Constructeur fluent de listes d'arguments, dans l'ordre
    d'ajout.
    """

    def __init__(self) -> None:
        self._args: List[str] = []

    def with_flag(self, flag: str) -> "CommandBuilder":
        """Ajoute un flag simple (ex: '--webm').

        Raises:
            ValueError: Si flag est vide.
        """
        if not flag or not flag.strip():
            raise ValueError("Le flag est requis.")
        self._args.append(flag)
        return self

    def with_flag_if(
        self, flag: str, condition: bool
    ) -> "CommandBuilder":
        """Ajoute un flag seulement si la condition est vraie."""
        if condition:
            self.with_flag(flag)
        return self

    def with_option(
        self, key: str, value: str
    ) -> "CommandBuilder":
        """Ajoute une option suivie de sa valeur, en deux arguments.

        Args:
            key: Option (ex: '--title').
            value: Valeur de l'option (ex: 'Mon film').

        Returns:
            L'instance courante pour le chaînage.
        """
        self.with_flag(key)
        self._args.append(value)
        return self

    def with_option_if(
        self,
        key: str,
        value: Optional[str],
        condition: bool = True,
    ) -> "CommandBuilder":
        """Ajoute une option seulement si la condition est vraie.

        L'option est ignorée si condition est False ou si
        value est None.

        Args:
            key: Option.
            value: Valeur de l'option (peut être None).
            condition: Condition d'ajout (défaut: True).

        Returns:
            L'instance courante pour le chaînage.
        """
        if condition and value is not None:
            self.with_option(key, value)
        return self

    def with_command_args(
        self, element: CommandArgs
    ) -> "CommandBuilder":
        """Ajoute les arguments produits par un CommandArgs."""
        self._args.extend(element.command_args())
        return self

    def with_args(
        self, args: List[str]
    ) -> "CommandBuilder":
        """Ajoute des arguments bruts (ex: chemins de fichiers)."""
        self._args.extend(args)
        return self

    def build(self) -> List[str]:
        """Retourne une copie de la liste d'arguments."""
        return list(self._args)
