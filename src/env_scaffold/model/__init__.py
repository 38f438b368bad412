"""Enums shared across the parser, editor and pipeline layers."""

from __future__ import annotations

from enum import Enum


class LineKind(str, Enum):
    """Classification of one line of an env-example file."""

    COMMENT = "comment"
    BLANK = "blank"
    VARIABLE = "variable"


class PipelineState(str, Enum):
    """Phases of one ``examples`` run. DONE and FAILED are terminal."""

    DISCOVERING = "discovering"
    SELECTING = "selecting"
    PARSING = "parsing"
    EDITING = "editing"
    RENDERING = "rendering"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


class EditOutcome(str, Enum):
    """What happened when a document went through the editor."""

    EDITED = "edited"
    SKIPPED = "skipped"      # no VARIABLE lines, nothing asked
    CANCELLED = "cancelled"


class Cancelled:
    """Type of the :data:`CANCELLED` sentinel; compare with ``is``."""

    def __repr__(self) -> str:
        return "CANCELLED"


# Returned by selectors/prompters when the user aborts (Ctrl-C / EOF).
CANCELLED = Cancelled()
