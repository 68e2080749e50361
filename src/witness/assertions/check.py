"""Call-site-aware equality checks."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from witness.assertions.result import CheckMode, CheckResult, record_result
from witness.compare import structural_equals
from witness.config import get_config
from witness.errors import CheckFailedError, StackDepthError
from witness.introspection import resolve_call_site
from witness.reporting import (
    ACTUAL_STYLE,
    EXPECTED_STYLE,
    FAIL_STYLE,
    SUCCESS_STYLE,
    emit,
    render_value,
    separator,
    styled,
)

logger = logging.getLogger(__name__)

SHOULD_EQUAL = "this should equal to each other"
SHOULD_DIFFER = "this should not equal to each other"
IS_EQUAL = "this is equal to each other"
IS_DIFFERENT = "this is not equal to each other"


def check(
    actual: Any,
    expected: Any,
    *,
    equal: bool = True,
    fmt: str = "",
    fatal: bool | None = None,
    verbose: bool | None = None,
    stacklevel: int = 1,
) -> CheckResult:
    """Check that ``actual`` and ``expected`` are (or, with ``equal=False``, are not) structurally equal.

    Parameters
    ----------
    actual : Any
        Value produced by the code under test
    expected : Any
        Value to compare against
    equal : bool
        Whether the values must be equal (True) or must differ (False)
    fmt : str
        Format hint used to render both values (see ``render_value``)
    fatal : bool | None
        Raise CheckFailedError on failure; defaults to the configured ``fatal``
    verbose : bool | None
        Print the values on success too; defaults to the configured ``verbose``
    stacklevel : int
        Which caller to report as the call site; 1 is the direct caller

    Returns:
    -------
    CheckResult
        Result of the check; also recorded by an active ``collect_results``

    Raises:
    ------
    CheckFailedError
        If the check fails in fatal mode
    """
    if stacklevel < 1:
        raise StackDepthError(f"stacklevel must be >= 1, got {stacklevel}")

    location = resolve_call_site(stacklevel)
    mode = CheckMode.from_config(get_config(), fatal=fatal, verbose=verbose)
    passed = structural_equals(actual, expected) == equal

    result = CheckResult(
        location=location,
        expect_equal=equal,
        passed=passed,
        actual=render_value(actual, fmt),
        expected=render_value(expected, fmt),
        message=None if passed else (SHOULD_EQUAL if equal else SHOULD_DIFFER),
    )
    record_result(result)
    _report(result, mode)

    if not passed:
        logger.debug("Check failed at %s", location)
        if mode.fatal_on_failure:
            raise CheckFailedError(result)
    return result


def check_equal(actual: Any, expected: Any, *, stacklevel: int = 1, **kwargs: Any) -> CheckResult:
    """Shorthand for ``check(actual, expected, equal=True)``."""
    return check(actual, expected, equal=True, stacklevel=stacklevel + 1, **kwargs)


def check_not_equal(actual: Any, expected: Any, *, stacklevel: int = 1, **kwargs: Any) -> CheckResult:
    """Shorthand for ``check(actual, expected, equal=False)``."""
    return check(actual, expected, equal=False, stacklevel=stacklevel + 1, **kwargs)


def _report(result: CheckResult, mode: CheckMode) -> None:
    actual_lines = [styled("Actual:", ACTUAL_STYLE), styled(result.actual, ACTUAL_STYLE)]
    expected_lines = [styled("Expected:", EXPECTED_STYLE), styled(result.expected, EXPECTED_STYLE)]

    if not result.passed:
        emit(
            styled(str(result.location), FAIL_STYLE),
            styled(result.message or ""),
            *actual_lines,
            *expected_lines,
            separator(),
        )
        return

    if not mode.verbose_on_success:
        emit(styled(str(result.location), SUCCESS_STYLE))
        return

    emit(
        styled(str(result.location), SUCCESS_STYLE),
        styled(IS_EQUAL if result.expect_equal else IS_DIFFERENT),
        *actual_lines,
        *([] if result.expect_equal else expected_lines),
        separator(),
    )


@contextmanager
def exit_on_failure(status: int = 1) -> Iterator[None]:
    """Turn a fatal check failure into ``SystemExit(status)``.

    Works as a context manager or as a decorator (``@exit_on_failure()``) around
    a script's entry point.
    """
    try:
        yield
    except CheckFailedError as exc:
        logger.debug("Exiting with status %d after failed check at %s", status, exc.check_result.location)
        raise SystemExit(status) from exc
