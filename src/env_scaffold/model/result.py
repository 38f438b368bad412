"""ScaffoldResult — what one ``examples`` run did."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from env_scaffold import __version__
from env_scaffold.model import PipelineState


@dataclass(frozen=True, slots=True)
class WrittenFile:
    """One ``.env`` file produced from an example."""

    source: Path
    target: Path
    variables: int
    edited: int

    def to_dict(self, root: Path) -> dict[str, Any]:
        return {
            "source": _rel(self.source, root),
            "target": _rel(self.target, root),
            "variables": self.variables,
            "edited": self.edited,
        }


def _rel(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


@dataclass(slots=True)
class ScaffoldResult:
    """Mutable run record; the controller fills it in as it goes.

    Serialises to ``scaffold_result.schema.json``.
    """

    root: Path
    state: PipelineState = PipelineState.DISCOVERING
    discovered: list[Path] = field(default_factory=list)
    selected: list[Path] = field(default_factory=list)
    written: list[WrittenFile] = field(default_factory=list)
    cancelled: bool = False
    error: str | None = None
    tool_version: str = __version__

    @property
    def ok(self) -> bool:
        """True unless a fatal error stopped the run (cancelling is ok)."""
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": "scaffold_result_v1",
            "tool_version": self.tool_version,
            "root": self.root.as_posix(),
            "state": self.state.value,
            "discovered": [_rel(p, self.root) for p in self.discovered],
            "selected": [_rel(p, self.root) for p in self.selected],
            "written": [w.to_dict(self.root) for w in self.written],
            "cancelled": self.cancelled,
            "error": self.error,
        }
