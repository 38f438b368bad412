"""Interactive console selector and prompter built on ``input()``.

Ctrl-C and end-of-input both count as the user aborting and produce the
``CANCELLED`` sentinel rather than an exception.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Callable, Sequence, TextIO

from env_scaffold.model import CANCELLED, Cancelled
from env_scaffold.model.document import PromptSpec

InputFunc = Callable[[str], str]

_SPLIT = re.compile(r"[,\s]+")


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


def parse_selection(answer: str, count: int) -> list[int] | None:
    """Turn a selection answer into 0-based indexes.

    Empty or ``all`` selects everything, ``none`` selects nothing, otherwise
    1-based numbers separated by commas/spaces. Returns None when invalid.
    """
    answer = answer.strip().lower()
    if answer in ("", "all", "a"):
        return list(range(count))
    if answer in ("none", "n", "-"):
        return []

    picked: list[int] = []
    for token in _SPLIT.split(answer):
        if not token:
            continue
        if not token.isdigit():
            return None
        number = int(token)
        if not 1 <= number <= count:
            return None
        if number - 1 not in picked:
            picked.append(number - 1)
    return sorted(picked)


class ConsoleSelector:
    """Numbered multi-select; every candidate starts out selected."""

    def __init__(self, input_func: InputFunc | None = None, out: TextIO | None = None) -> None:
        # Looked up per call so a patched builtins.input is honoured.
        self._input = input_func or (lambda prompt: input(prompt))
        self._out = out if out is not None else sys.stderr

    def select(self, candidates: Sequence[Path], root: Path) -> list[Path] | Cancelled:
        if not candidates:
            return []

        print("Select files to parse", file=self._out)
        for i, path in enumerate(candidates, start=1):
            print(f"  [x] {i}. {_relative(path, root)}", file=self._out)

        while True:
            try:
                answer = self._input("Files (Enter = all, 'none', or numbers e.g. 1,3): ")
            except (KeyboardInterrupt, EOFError):
                print("", file=self._out)
                return CANCELLED
            indexes = parse_selection(answer, len(candidates))
            if indexes is not None:
                return [candidates[i] for i in indexes]
            print(f"Please answer with numbers between 1 and {len(candidates)}.", file=self._out)


class ConsolePrompter:
    """Asks ``LABEL [initial]: `` per variable; Enter keeps the initial value."""

    def __init__(self, input_func: InputFunc | None = None, out: TextIO | None = None) -> None:
        # Looked up per call so a patched builtins.input is honoured.
        self._input = input_func or (lambda prompt: input(prompt))
        self._out = out if out is not None else sys.stderr

    def _ask(self, spec: PromptSpec) -> str:
        if spec.initial_value:
            ans = self._input(f"{spec.label} [{spec.initial_value}]: ")
            return ans or spec.initial_value
        return self._input(f"{spec.label}: ")

    def prompt(self, title: str, specs: Sequence[PromptSpec]) -> dict[int, str] | Cancelled:
        if title:
            print(title, file=self._out)
        answers: dict[int, str] = {}
        for spec in specs:
            try:
                answers[spec.identifier] = self._ask(spec)
            except (KeyboardInterrupt, EOFError):
                print("", file=self._out)
                return CANCELLED
        return answers
