"""Fatal errors raised by the scaffold pipeline.

User cancellation is *not* an error: selectors and prompters return the
:data:`env_scaffold.model.CANCELLED` sentinel instead.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base class for fatal pipeline errors; carries the offending path."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")


class DiscoveryError(ScaffoldError):
    """Root directory unreadable, or ``.gitignore`` missing/unreadable."""


class WriteError(ScaffoldError):
    """An output ``.env`` file could not be written."""
