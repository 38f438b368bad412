"""LineRecord / FileDocument — the parsed form of an env-example file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from . import LineKind


@dataclass(slots=True)
class LineRecord:
    """One line of an env-example file.

    ``edited_value`` is the only field that changes after parsing; it is
    filled in from the user's answers and wins over ``default_value`` when
    non-empty.
    """

    kind: LineKind
    raw_text: str
    key: str | None = None
    default_value: str | None = None
    edited_value: str | None = None

    @property
    def is_variable(self) -> bool:
        return self.kind is LineKind.VARIABLE

    @property
    def value(self) -> str:
        """Value a VARIABLE line renders with."""
        if self.edited_value:
            return self.edited_value
        return self.default_value or ""

    def to_dict(self) -> dict:
        d: dict = {"kind": self.kind.value, "raw_text": self.raw_text}
        if self.key is not None:
            d["key"] = self.key
            d["default_value"] = self.default_value
        if self.edited_value is not None:
            d["edited_value"] = self.edited_value
        return d


@dataclass(frozen=True, slots=True)
class PromptSpec:
    """One question for the prompt UI.

    ``identifier`` is the index of the record inside its document.
    """

    identifier: int
    label: str
    initial_value: str = ""


@dataclass(slots=True)
class FileDocument:
    """Ordered line records of one source file."""

    source: Path
    records: list[LineRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[LineRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> LineRecord:
        return self.records[index]

    def variables(self) -> Iterator[tuple[int, LineRecord]]:
        """Yield ``(index, record)`` for every VARIABLE line, in order."""
        for i, record in enumerate(self.records):
            if record.is_variable:
                yield i, record

    @property
    def variable_count(self) -> int:
        return sum(1 for _ in self.variables())

    @property
    def edited_count(self) -> int:
        """VARIABLE lines whose answer differs from the example value."""
        return sum(
            1
            for _, r in self.variables()
            if r.edited_value is not None and r.value != (r.default_value or "")
        )
