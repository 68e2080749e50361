"""Parse stack dump lines into source locations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from witness.errors import LineNumberError, LocationFormatError

FILE_PREFIX = 'File "'
LINE_MARKER = '", line '


class SourceLocation(BaseModel):
    """A file and 1-based line number."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    line_number: int = Field(ge=1)

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line_number}"


def parse_location(frame_text: str) -> SourceLocation:
    """Parse a ``File "<path>", line <n>, in <name>`` line.

    The path is everything between the ``File "`` prefix and the ``", line``
    marker; the line number is the run of characters after the marker up to the
    next comma or whitespace.
    """
    head, sep, tail = frame_text.partition(LINE_MARKER)
    if not sep:
        raise LocationFormatError(f"invalid location format: {frame_text!r}")

    head = head.strip()
    if head.startswith(FILE_PREFIX):
        head = head[len(FILE_PREFIX):]
    if not head:
        raise LocationFormatError(f"invalid location format: {frame_text!r}")

    token = tail.split(",", 1)[0].strip()
    digits = token.split()[0] if token else ""
    try:
        line_number = int(digits)
    except ValueError as exc:
        raise LineNumberError(f"invalid line number: {digits!r}") from exc
    if line_number < 1:
        raise LineNumberError(f"invalid line number: {line_number}")

    return SourceLocation(file_path=head, line_number=line_number)
