"""Line parser — env-example text → ordered :class:`LineRecord` list.

Classification, first match wins:

    ``#...``        COMMENT   (kept verbatim)
    empty line      BLANK
    anything else   VARIABLE  (split on the first ``=``)

A VARIABLE line without ``=`` (or starting with ``=``) keeps the whole
line as its key and has no default value.
"""

from __future__ import annotations

from pathlib import Path

from env_scaffold.model import LineKind
from env_scaffold.model.document import FileDocument, LineRecord


def split_lines(content: str) -> list[str]:
    """Split *content* into lines; a trailing newline does not add a line.

    ``""`` yields ``[""]`` so an empty file still produces one record.
    """
    lines = content.replace("\r\n", "\n").split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def parse_line(line: str) -> LineRecord:
    if line.startswith("#"):
        return LineRecord(LineKind.COMMENT, line, default_value=line)
    if line == "":
        return LineRecord(LineKind.BLANK, line, default_value=line)

    key, sep, value = line.partition("=")
    if not key:
        # "=value": keys are never empty, fall back to the no-"=" shape.
        key, sep = line, ""
    return LineRecord(
        LineKind.VARIABLE,
        line,
        key=key,
        default_value=value if sep else None,
    )


def parse_content(content: str) -> list[LineRecord]:
    """Parse env-example *content*; one record per line, order preserved."""
    return [parse_line(line) for line in split_lines(content)]


def parse_file(path: Path, *, encoding: str = "utf-8") -> FileDocument:
    """Read and parse one example file."""
    content = path.read_text(encoding=encoding)
    return FileDocument(source=path, records=parse_content(content))
