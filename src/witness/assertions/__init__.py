"""Assertion helpers that report their own call site."""

from .case import TableCase, report_case, run_table
from .check import check, check_equal, check_not_equal, exit_on_failure
from .result import CheckMode, CheckResult, ResultCollector, collect_results

__all__ = [
    "CheckMode",
    "CheckResult",
    "ResultCollector",
    "TableCase",
    "check",
    "check_equal",
    "check_not_equal",
    "collect_results",
    "exit_on_failure",
    "report_case",
    "run_table",
]
