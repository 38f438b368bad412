"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — files written, nothing selected, or the user cancelled
  2   Error — bad root, unreadable .gitignore, failed write
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 2
