"""Tests for .env.example discovery."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from env_scaffold.core.discover import discover_example_files
from env_scaffold.core.gitignore import parse_gitignore
from env_scaffold.errors import DiscoveryError


def _touch(root: Path, rel: str, text: str = "A=1\n") -> Path:
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


class TestDiscoverExampleFiles:
    def test_finds_nested_examples_sorted_and_absolute(self, tmp_path: Path):
        b = _touch(tmp_path, "services/b/.env.example")
        a = _touch(tmp_path, ".env.example")
        c = _touch(tmp_path, "services/a/.env.example")
        _touch(tmp_path, "services/a/.env")
        _touch(tmp_path, "services/a/env.example")

        found = discover_example_files(tmp_path)

        assert found == sorted([a.resolve(), b.resolve(), c.resolve()])
        assert all(p.is_absolute() for p in found)

    def test_ignore_patterns_exclude_matches(self, tmp_path: Path):
        keep = _touch(tmp_path, "app/.env.example")
        _touch(tmp_path, "node_modules/lib/.env.example")
        _touch(tmp_path, "dist/.env.example")

        found = discover_example_files(
            tmp_path, ignore=parse_gitignore("node_modules/\n/dist\n")
        )

        assert found == [keep.resolve()]

    def test_git_directory_is_never_searched(self, tmp_path: Path):
        _touch(tmp_path, ".git/hooks/.env.example")
        assert discover_example_files(tmp_path) == []

    def test_missing_root_raises(self, tmp_path: Path):
        with pytest.raises(DiscoveryError):
            discover_example_files(tmp_path / "nope")

    def test_file_root_raises(self, tmp_path: Path):
        f = _touch(tmp_path, "file.txt")
        with pytest.raises(DiscoveryError):
            discover_example_files(f)

    def test_custom_name(self, tmp_path: Path):
        p = _touch(tmp_path, "cfg/.env.sample")
        assert discover_example_files(tmp_path, name=".env.sample") == [p.resolve()]

    def test_ignored_directories_are_not_descended(self, tmp_path: Path, caplog):
        keep = _touch(tmp_path, "app/.env.example")
        _touch(tmp_path, "apps/web/node_modules/deep/pkg/.env.example")
        caplog.set_level(logging.DEBUG, logger="env_scaffold.core.discover")

        found = discover_example_files(tmp_path, ignore=parse_gitignore("node_modules/\n"))

        assert found == [keep.resolve()]
        assert "pruned ignored directory: apps/web/node_modules/" in caplog.text
        assert "deep" not in caplog.text

    def test_file_patterns_do_not_prune_directories(self, tmp_path: Path):
        """``*.log`` style rules only drop matching paths, not their siblings."""
        keep = _touch(tmp_path, "logs/.env.example")

        found = discover_example_files(tmp_path, ignore=parse_gitignore("*.log\n"))

        assert found == [keep.resolve()]
