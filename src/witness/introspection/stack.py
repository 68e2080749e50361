"""Capture the interpreter stack as text and locate instrumentation call sites.

The stack dump produced by :func:`render_stack` lists frames innermost first,
``LINES_PER_FRAME`` lines per frame::

    File "<path>", line <n>, in <function>
        <source text of that line>

Every depth handed to :func:`capture_frame` is an index into that dump, so the
depth constants below must follow the number of witness frames sitting between
the capture point and the user's call.
"""

from __future__ import annotations

import inspect
import logging
import traceback
from types import FrameType

from witness.errors import IntrospectionError, StackDepthError
from witness.introspection.location import SourceLocation, parse_location
from witness.introspection.source import resolve_line

logger = logging.getLogger(__name__)

LINES_PER_FRAME = 2
# capture_frame's own frame occupies the first two lines of the dump.
MIN_FRAME_DEPTH = LINES_PER_FRAME
# capture_frame and resolve_call_site.
CALL_SITE_INTERNAL_FRAMES = 2


def render_stack(frame: FrameType | None = None) -> list[str]:
    """Render the stack starting at ``frame`` (default: the caller) innermost first."""
    if frame is None:
        frame = inspect.currentframe()
        frame = frame.f_back if frame is not None else None

    lines: list[str] = []
    for entry in reversed(traceback.extract_stack(frame)):
        lines.append(f'File "{entry.filename}", line {entry.lineno}, in {entry.name}')
        lines.append(f"    {(entry.line or '').strip()}")
    return lines


def capture_frame(depth: int) -> str:
    """Return line ``depth`` of the current stack dump.

    Index 0 is this function's own frame line, so ``depth`` must be at least
    ``MIN_FRAME_DEPTH`` and a multiple of ``LINES_PER_FRAME`` to land on a
    ``File ...`` line rather than a source-text line.
    """
    if depth < MIN_FRAME_DEPTH:
        raise StackDepthError(f"stack depth {depth} is below the minimum of {MIN_FRAME_DEPTH}")
    if depth % LINES_PER_FRAME:
        raise StackDepthError(
            f"stack depth {depth} is not a multiple of {LINES_PER_FRAME} and would land on a source line"
        )

    frame = inspect.currentframe()
    try:
        lines = render_stack(frame)
    finally:
        del frame

    if depth >= len(lines):
        raise StackDepthError(f"stack depth {depth} is past the end of a {len(lines)}-line stack dump")
    return lines[depth].strip()


def resolve_call_site(stacklevel: int = 1) -> SourceLocation:
    """Locate the call site ``stacklevel`` frames above the function calling this one.

    ``stacklevel=1`` is the direct caller of that function, as with
    :func:`warnings.warn`.
    """
    if stacklevel < 1:
        raise StackDepthError(f"stacklevel must be >= 1, got {stacklevel}")

    depth = LINES_PER_FRAME * (CALL_SITE_INTERNAL_FRAMES + stacklevel)
    frame_text = capture_frame(depth)
    logger.debug("Captured frame at depth %d: %s", depth, frame_text)
    return parse_location(frame_text)


def stack(stacklevel: int = 1) -> str:
    """Return the stack dump line naming the caller (or an outer frame)."""
    if stacklevel < 1:
        raise StackDepthError(f"stacklevel must be >= 1, got {stacklevel}")
    return capture_frame(LINES_PER_FRAME * (1 + stacklevel))


def _probe() -> SourceLocation:
    return resolve_call_site(1)


def verify_stack_layout() -> SourceLocation:
    """Check that the depth constants match this interpreter's stack layout.

    Resolves a call site from a known line and reads it back from disk.
    Raises IntrospectionError when either step disagrees.
    """
    frame = inspect.currentframe()
    if frame is None:
        raise IntrospectionError("this interpreter does not expose stack frames")
    expected = SourceLocation(file_path=frame.f_code.co_filename, line_number=frame.f_lineno + 1)
    location = _probe()
    del frame

    if location != expected:
        raise IntrospectionError(f"stack layout mismatch: expected {expected}, resolved {location}")
    if "_probe()" not in resolve_line(location.file_path, location.line_number):
        raise IntrospectionError(f"source at {location} does not contain the probe call")
    return location
