"""Ignore-pattern source — ``.gitignore`` text → flat list of glob patterns.

Each gitignore rule becomes one or two globs matched against root-relative
POSIX paths with :func:`fnmatch.fnmatchcase`:

    node_modules/   →  **/node_modules/**
    *.log           →  **/*.log, **/*.log/**
    /build          →  build, build/**
    docs/tmp        →  docs/tmp, docs/tmp/**

Negated rules (``!pattern``) contribute their pattern like any other rule;
re-including a file is not supported.
"""

from __future__ import annotations

import logging
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable

from env_scaffold.errors import DiscoveryError

_logger = logging.getLogger(__name__)

GITIGNORE_NAME = ".gitignore"


def rule_to_globs(rule: str) -> list[str]:
    """Translate one non-comment gitignore rule into glob patterns."""
    if rule.startswith("!"):
        _logger.debug("negated rule %r is treated as an ignore pattern", rule)
        rule = rule[1:]
    if rule.startswith("\\"):
        rule = rule[1:]

    dir_only = rule.endswith("/")
    rule = rule.rstrip("/")
    if not rule:
        return []

    # A slash anywhere but the end anchors the rule to the root.
    anchored = "/" in rule
    rule = rule.lstrip("/")
    base = rule if anchored else f"**/{rule}"

    globs = [f"{base}/**"]
    if not dir_only:
        globs.insert(0, base)
    return globs


def parse_gitignore(content: str) -> list[str]:
    """Parse gitignore *content* into a flat, ordered, de-duplicated list."""
    patterns: list[str] = []
    seen: set[str] = set()
    for raw in content.splitlines():
        line = raw.rstrip()
        if not line or line.startswith("#"):
            continue
        for glob in rule_to_globs(line):
            if glob not in seen:
                seen.add(glob)
                patterns.append(glob)
    return patterns


def read_gitignore(root: Path, *, encoding: str = "utf-8") -> list[str]:
    """Read ``<root>/.gitignore``.

    Raises
    ------
    DiscoveryError
        If the file is missing or cannot be read/decoded.
    """
    path = root / GITIGNORE_NAME
    if not path.is_file():
        raise DiscoveryError(path, "no .gitignore found (use --no-gitignore to skip ignore rules)")
    try:
        content = path.read_text(encoding=encoding)
    except (OSError, UnicodeError, LookupError) as exc:
        raise DiscoveryError(path, f"cannot read .gitignore: {exc}") from exc

    patterns = parse_gitignore(content)
    _logger.debug("loaded %d ignore pattern(s) from %s", len(patterns), path)
    return patterns


def is_ignored(rel_path: str, patterns: Iterable[str]) -> bool:
    """True when root-relative POSIX *rel_path* matches any pattern."""
    for pat in patterns:
        if fnmatchcase(rel_path, pat):
            return True
        # "**/x" must also match "x" at the top level.
        if pat.startswith("**/") and fnmatchcase(rel_path, pat[3:]):
            return True
    return False
