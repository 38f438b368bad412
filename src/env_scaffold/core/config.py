"""Scaffold configuration dataclass.

Environment variables fill in anything the caller does not pass:

    ENV_SCAFFOLD_NO_GITIGNORE   1/true/yes/on → skip .gitignore filtering
    ENV_SCAFFOLD_ENCODING       text encoding for reads and writes
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ScaffoldConfig:
    """Immutable configuration for one ``examples`` run."""

    root: Path = field(default_factory=lambda: Path("."))
    use_gitignore: bool = True
    example_name: str = ".env.example"
    encoding: str = "utf-8"

    @classmethod
    def from_env(
        cls,
        root: Path | str = ".",
        *,
        env: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> ScaffoldConfig:
        """Build a config from *env* (default ``os.environ``), then *overrides*.

        Overrides whose value is ``None`` are ignored so CLI flags that were
        not given fall through to the environment.
        """
        if env is None:
            env = os.environ
        cfg = cls(root=Path(root))

        no_gitignore = env.get("ENV_SCAFFOLD_NO_GITIGNORE")
        if no_gitignore is not None:
            cfg = replace(cfg, use_gitignore=no_gitignore.strip().lower() not in _TRUTHY)
        encoding = env.get("ENV_SCAFFOLD_ENCODING")
        if encoding:
            cfg = replace(cfg, encoding=encoding.strip())

        explicit = {k: v for k, v in overrides.items() if v is not None}
        return replace(cfg, **explicit) if explicit else cfg
