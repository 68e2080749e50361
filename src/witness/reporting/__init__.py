"""Console reporting helpers."""

from .console import (
    ACTUAL_STYLE,
    BENCHMARK_STYLE,
    DEBUG_STYLE,
    EXPECTED_STYLE,
    FAIL_STYLE,
    SUCCESS_STYLE,
    console_scope,
    emit,
    get_console,
    render_value,
    separator,
    styled,
)

__all__ = [
    "ACTUAL_STYLE",
    "BENCHMARK_STYLE",
    "DEBUG_STYLE",
    "EXPECTED_STYLE",
    "FAIL_STYLE",
    "SUCCESS_STYLE",
    "console_scope",
    "emit",
    "get_console",
    "render_value",
    "separator",
    "styled",
]
