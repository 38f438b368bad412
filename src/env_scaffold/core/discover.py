"""File discovery — find ``.env.example`` files respecting ignore patterns."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from env_scaffold.core.gitignore import is_ignored
from env_scaffold.errors import DiscoveryError

_logger = logging.getLogger(__name__)

EXAMPLE_NAME = ".env.example"

# Never descended into, whatever .gitignore says.
_DEFAULT_EXCLUDES = frozenset({".git"})


def _walk(root: Path, base: Path, dir_patterns: list[str]) -> Iterator[Path]:
    """Depth-first walk that surfaces unreadable subdirectories as warnings.

    Directories matched by a ``dir/**`` pattern are not descended into;
    everything below them would be ignored anyway.
    """
    try:
        entries = sorted(root.iterdir())
    except OSError as exc:
        _logger.warning("skipping unreadable directory %s: %s", root, exc)
        return
    for entry in entries:
        if entry.is_symlink():
            continue
        if entry.is_dir():
            if entry.name in _DEFAULT_EXCLUDES:
                continue
            rel = entry.relative_to(base).as_posix() + "/"
            if dir_patterns and is_ignored(rel, dir_patterns):
                _logger.debug("pruned ignored directory: %s", rel)
                continue
            yield from _walk(entry, base, dir_patterns)
        else:
            yield entry


def discover_example_files(
    root: Path,
    *,
    ignore: Iterable[str] = (),
    name: str = EXAMPLE_NAME,
) -> list[Path]:
    """Recursively find files called *name* under *root*.

    Parameters
    ----------
    root:
        Directory to scan.
    ignore:
        Glob patterns (see :mod:`env_scaffold.core.gitignore`) matched
        against root-relative POSIX paths.
    name:
        File name to look for.  Default: ``.env.example``.

    Returns
    -------
    Sorted list of absolute ``Path`` objects.

    Raises
    ------
    DiscoveryError
        If *root* is not a readable directory.
    """
    root = root.resolve()
    if not root.is_dir():
        raise DiscoveryError(root, "not a directory")
    try:
        next(root.iterdir(), None)
    except OSError as exc:
        raise DiscoveryError(root, f"cannot read directory: {exc}") from exc

    patterns = list(ignore)
    dir_patterns = [p for p in patterns if p.endswith("/**")]
    results: list[Path] = []
    for p in _walk(root, root, dir_patterns):
        if p.name != name:
            continue
        rel = p.relative_to(root).as_posix()
        if patterns and is_ignored(rel, patterns):
            _logger.debug("ignored by pattern: %s", rel)
            continue
        results.append(p)

    return sorted(results)
