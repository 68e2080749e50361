"""Print a value labelled with the source text that produced it."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from witness.errors import StackDepthError
from witness.introspection import extract_expression_name, resolve_call_site, resolve_line
from witness.reporting import ACTUAL_STYLE, DEBUG_STYLE, emit, render_value, separator, styled

logger = logging.getLogger(__name__)

T = TypeVar("T")


def debug(fmt: str, value: T, *, stacklevel: int = 1) -> T:
    """Print the call site, then ``<expression>: <value>``, and return ``value``.

    The expression is read back from the calling line, so the call must fit on
    one line and pass the value as the second positional argument, e.g.
    ``debug("r", user.name)``. Failing to locate or read the call site raises
    an IntrospectionError.
    """
    if stacklevel < 1:
        raise StackDepthError(f"stacklevel must be >= 1, got {stacklevel}")

    location = resolve_call_site(stacklevel)
    line = resolve_line(location.file_path, location.line_number)
    name = extract_expression_name(line)
    logger.debug("Resolved debug call at %s to expression %r", location, name)

    label = styled(f"{name}: ", ACTUAL_STYLE)
    label.append(render_value(value, fmt))
    emit(styled(str(location), DEBUG_STYLE), label, separator())
    return value
