"""Fixtures partagées des tests."""

import io
import sys
from typing import List, Optional

import pytest

from mkvtoolnix_utils.commands.base import ToolnixBinary, ToolnixCommand
from mkvtoolnix_utils.config.models import ToolnixConfig
from mkvtoolnix_utils.results.result import LazyCommandResult
from mkvtoolnix_utils.results.sequence import CachedLineSequence


class FakeCommand(ToolnixCommand):
    """Commande mkvmerge factice aux arguments fixes."""

    def __init__(self, args: Optional[List[str]] = None, executor=None):
        super().__init__(ToolnixBinary.MKV_MERGE, executor)
        self._args = args or ["--version"]

    def command_args(self) -> List[str]:
        return list(self._args)


class PythonCommand(ToolnixCommand):
    """Commande qui lance un script Python au lieu d'un binaire
    MKVToolNix, pour tester l'exécution réelle d'un processus.
    """

    def __init__(self, script: str, executor=None):
        super().__init__(ToolnixBinary.MKV_MERGE, executor)
        self.script = script

    def command_args(self) -> List[str]:
        return ["-c", self.script]

    def command_line(self, config: Optional[ToolnixConfig] = None):
        return [sys.executable] + self.command_args()


def make_lazy_result(
    lines: List[str],
    exit_code: int,
    command: Optional[ToolnixCommand] = None,
    success_code: int = 1,
) -> LazyCommandResult:
    """Construit un LazyCommandResult adossé à un flux en mémoire."""
    stream = io.StringIO("".join(f"{line}\n" for line in lines))
    return LazyCommandResult(
        command or FakeCommand(),
        stream,
        CachedLineSequence(stream),
        lambda: exit_code,
        success_code=success_code,
    )


WARNING_OUTPUT = [
    "Starting.",
    "Warning: track 2 has no language",
    "Done.",
]


@pytest.fixture
def fake_command() -> FakeCommand:
    return FakeCommand()
