r"""Tab-separated interaction log reader.

Each line records one directed interaction::

    <timestamp>\t<from>\t<to>

The timestamp is informational only.  Lines with exactly two fields are
accepted as ``<from>\t<to>``.  Blank lines are skipped.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from clique_stream.errors import StreamFormatError


class Interaction(BaseModel):
    """One directed interaction event."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    timestamp: str | None = None
    source: str = Field(min_length=1)
    target: str = Field(min_length=1)


def parse_interaction_line(line: str, line_no: int | None = None) -> Interaction | None:
    """Parse one log line.

    Returns:
        The parsed ``Interaction``, or ``None`` for a blank line.

    Raises:
        StreamFormatError: If the line has fewer than two fields or an
            empty endpoint.
    """
    stripped = line.strip()
    if not stripped:
        return None

    fields = stripped.split("\t")
    if len(fields) < 2:
        raise StreamFormatError("expected at least two tab-separated fields", line_no, line)

    timestamp = fields[0] if len(fields) > 2 else None
    try:
        return Interaction(timestamp=timestamp, source=fields[-2], target=fields[-1])
    except ValidationError as e:
        raise StreamFormatError(f"invalid interaction: {e}", line_no, line) from e


def iter_interactions(lines: Iterable[str]) -> Iterator[Interaction]:
    """Parse an iterable of lines lazily, skipping blanks."""
    for line_no, line in enumerate(lines, start=1):
        interaction = parse_interaction_line(line, line_no)
        if interaction is not None:
            yield interaction


def read_interactions(file_path: Path) -> Iterator[Interaction]:
    """Stream interactions from a log file.

    Raises:
        FileNotFoundError: If ``file_path`` does not exist (raised on
            first iteration).
        StreamFormatError: On the first malformed line.
    """
    with open(file_path, encoding="utf-8") as f:
        yield from iter_interactions(f)
