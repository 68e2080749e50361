"""Error types raised by witness."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from witness.assertions.result import CheckResult


class WitnessError(Exception):
    """Base class for witness errors."""


class ConfigError(WitnessError):
    """Raised when configuration values cannot be parsed."""


class IntrospectionError(WitnessError):
    """Raised when the call site of an instrumentation call cannot be resolved.

    These errors mean the instrumentation itself is broken, not the code under
    test, so they always propagate to the caller.
    """


class StackDepthError(IntrospectionError, ValueError):
    """Raised when a stack depth points outside the usable part of the stack dump."""


class LocationFormatError(IntrospectionError, ValueError):
    """Raised when a stack frame line has no recognisable file/line marker."""


class LineNumberError(IntrospectionError, ValueError):
    """Raised when the line number in a stack frame line is not a positive integer."""


class SourceUnavailableError(IntrospectionError):
    """Raised when the source file named by a stack frame cannot be read."""

    def __init__(self, file_path: str | Path, cause: Exception | None = None) -> None:
        self.file_path = Path(file_path)
        self.cause = cause

        message = f"error reading file: {file_path}"
        if cause:
            message += f" ({cause})"

        super().__init__(message)


class LineRangeError(IntrospectionError, IndexError):
    """Raised when a line number is outside ``[1, total_lines]``."""

    def __init__(self, file_path: str | Path, line_number: int, total_lines: int) -> None:
        self.file_path = Path(file_path)
        self.line_number = line_number
        self.total_lines = total_lines
        super().__init__(
            f"invalid line number: {line_number} (file {file_path} has {total_lines} lines)"
        )


class UncomparableValueError(WitnessError, TypeError):
    """Raised when structural equality is asked of values that have no structure to compare."""


class CheckFailedError(AssertionError):
    """AssertionError with the attached CheckResult."""

    def __init__(self, result: CheckResult):
        self.check_result = result
        message = f"check failed at {result.location}"
        if result.message:
            message += f": {result.message}"
        super().__init__(message)
