"""Call-site introspection: stack capture, location parsing, source lookup."""

from .location import SourceLocation, parse_location
from .source import extract_expression_name, resolve_line
from .stack import (
    LINES_PER_FRAME,
    MIN_FRAME_DEPTH,
    capture_frame,
    render_stack,
    resolve_call_site,
    stack,
    verify_stack_layout,
)

__all__ = [
    "LINES_PER_FRAME",
    "MIN_FRAME_DEPTH",
    "SourceLocation",
    "capture_frame",
    "extract_expression_name",
    "parse_location",
    "render_stack",
    "resolve_call_site",
    "resolve_line",
    "stack",
    "verify_stack_layout",
]
