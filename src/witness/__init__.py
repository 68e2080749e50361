"""Witness - call-site-aware assertions, debug printing and benchmarks for tests."""

from .assertions import (
    CheckMode,
    CheckResult,
    TableCase,
    check,
    check_equal,
    check_not_equal,
    collect_results,
    exit_on_failure,
    report_case,
    run_table,
)
from .benchmark import BenchmarkResult, benchmark
from .compare import structural_equals
from .config import WitnessConfig, config_scope, get_config, load_config
from .debug import debug
from .errors import CheckFailedError, IntrospectionError, UncomparableValueError, WitnessError
from .introspection import SourceLocation, stack
from .reporting import console_scope
from .version import __version__


__all__ = [
    # Checks
    "check",
    "check_equal",
    "check_not_equal",
    "collect_results",
    "exit_on_failure",
    "report_case",
    "run_table",
    "CheckMode",
    "CheckResult",
    "TableCase",
    # Inspection
    "debug",
    "stack",
    "SourceLocation",
    "structural_equals",
    # Benchmarks
    "benchmark",
    "BenchmarkResult",
    # Configuration and output
    "WitnessConfig",
    "config_scope",
    "console_scope",
    "get_config",
    "load_config",
    # Errors
    "CheckFailedError",
    "IntrospectionError",
    "UncomparableValueError",
    "WitnessError",
    "__version__",
]
