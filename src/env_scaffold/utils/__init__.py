"""Shared utilities for env_scaffold."""

from env_scaffold.utils.exit_codes import ExitCode
from env_scaffold.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
