"""Table-driven checks.

This module provides:

- :func:`report_case`, which compares one input/expected/actual triple and
  always raises on mismatch. Matching cases print nothing.
- A :class:`TableCase` model for a row of a test table and :func:`run_table`,
  which feeds each row's input to a function and reports the outcome.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypeVar

from witness.assertions.check import SHOULD_EQUAL
from witness.assertions.result import CheckResult, record_result
from witness.compare import structural_equals
from witness.errors import CheckFailedError, StackDepthError
from witness.introspection import resolve_call_site
from witness.reporting import (
    ACTUAL_STYLE,
    EXPECTED_STYLE,
    FAIL_STYLE,
    emit,
    render_value,
    separator,
    styled,
)

InputT = TypeVar("InputT", default=Any)
ExpectedT = TypeVar("ExpectedT", default=Any)


class TableCase(BaseModel, Generic[InputT, ExpectedT]):
    """One row of a test table.

    Parameters
    ----------
    label:
        Name shown when the case fails.
    input:
        Value passed to the function under test.
    expected:
        Value the function should return for ``input``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    label: str
    input: InputT
    expected: ExpectedT


def report_case(
    fmt: str,
    label: str,
    case_input: Any,
    expected: Any,
    actual: Any,
    *,
    stacklevel: int = 1,
) -> None:
    """Raise CheckFailedError, after printing the case, if ``actual`` differs from ``expected``."""
    if stacklevel < 1:
        raise StackDepthError(f"stacklevel must be >= 1, got {stacklevel}")

    if structural_equals(actual, expected):
        return

    location = resolve_call_site(stacklevel)
    result = CheckResult(
        location=location,
        passed=False,
        actual=render_value(actual, fmt),
        expected=render_value(expected, fmt),
        label=label,
        message=f"case {label!r}: {SHOULD_EQUAL}",
    )
    record_result(result)

    emit(
        styled(str(location), FAIL_STYLE),
        styled("Case:", FAIL_STYLE),
        styled(label),
        styled("Input:"),
        styled(render_value(case_input, fmt)),
        styled("Actual:", ACTUAL_STYLE),
        styled(result.actual, ACTUAL_STYLE),
        styled("Expected:", EXPECTED_STYLE),
        styled(result.expected, EXPECTED_STYLE),
        separator(),
    )
    raise CheckFailedError(result)


def run_table(
    fn: Callable[[Any], Any],
    cases: Iterable[TableCase[Any, Any]],
    *,
    fmt: str = "",
    stacklevel: int = 1,
) -> int:
    """Call ``fn`` on each case input and report the first mismatch.

    Returns the number of cases that ran.
    """
    count = 0
    for case in cases:
        report_case(fmt, case.label, case.input, case.expected, fn(case.input), stacklevel=stacklevel + 1)
        count += 1
    return count
