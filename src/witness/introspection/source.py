"""Read call-site source lines and pull argument text out of them."""

from __future__ import annotations

import logging
from pathlib import Path

from witness.errors import LineRangeError, SourceUnavailableError

logger = logging.getLogger(__name__)

ARGUMENT_DELIMITER = ", "
CALL_CLOSE = ")"


def resolve_line(file_path: str | Path, line_number: int) -> str:
    """Return line ``line_number`` (1-based) of ``file_path``.

    The file is read again on every call.
    """
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(file_path, exc) from exc

    lines = text.splitlines()
    if line_number < 1 or line_number > len(lines):
        raise LineRangeError(file_path, line_number, len(lines))
    return lines[line_number - 1]


def extract_expression_name(source_line: str) -> str:
    """Return the source text of the second argument of a one-line call.

    ``debug("v", some.value)`` gives ``some.value``. The line is split on the
    first ``", "`` and one closing parenthesis is dropped from the end. Calls
    spread over several lines, calls without a space after the first comma and
    lines with trailing comments are not understood; they yield an empty or
    partial name and a warning.
    """
    _, sep, rest = source_line.strip().partition(ARGUMENT_DELIMITER)
    if not sep:
        logger.warning("Cannot find the expression argument in %r", source_line)
        return ""

    if rest.endswith(CALL_CLOSE):
        return rest[: -len(CALL_CLOSE)]

    logger.warning("Call in %r does not end on this line", source_line)
    return rest
