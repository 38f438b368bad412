"""User-interaction seams for the scaffold pipeline.

The pipeline never touches stdin directly. It talks to two collaborators:

1. ``Selector`` — picks which discovered example files to process.
2. ``Prompter`` — asks for a value for each variable of one file.

Both return :data:`env_scaffold.model.CANCELLED` when the user aborts.
``ConsoleSelector`` / ``ConsolePrompter`` in :mod:`.console` are the
interactive implementations used by the CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from env_scaffold.model import Cancelled
from env_scaffold.model.document import PromptSpec


class Selector(Protocol):
    def select(self, candidates: Sequence[Path], root: Path) -> list[Path] | Cancelled:
        """Return the confirmed subset of *candidates* (all pre-selected)."""
        ...


class Prompter(Protocol):
    def prompt(self, title: str, specs: Sequence[PromptSpec]) -> dict[int, str] | Cancelled:
        """Ask every question in *specs*; map identifier → entered text."""
        ...
