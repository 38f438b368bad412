"""Content renderer — line records → ``.env`` text."""

from __future__ import annotations

from typing import Iterable

from env_scaffold.model import LineKind
from env_scaffold.model.document import LineRecord


def render_line(record: LineRecord) -> str:
    if record.kind is LineKind.VARIABLE:
        return f"{record.key}={record.value}\n"
    if record.kind is LineKind.COMMENT:
        return f"{record.raw_text}\n"
    return "\n"


def render_document(records: Iterable[LineRecord]) -> str:
    """Render *records* back to text, one ``\\n``-terminated line each.

    Accepts a :class:`FileDocument` or any iterable of records.
    """
    return "".join(render_line(r) for r in records)
