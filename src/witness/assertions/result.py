"""Check outcome types and the soft-check result collector."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, SerializationInfo, field_serializer

from witness.config import WitnessConfig
from witness.introspection import SourceLocation


class CheckMode(BaseModel):
    """How a check reports its outcome.

    Attributes:
    ----------
    fatal_on_failure: bool
        Raise CheckFailedError after reporting a failure
    verbose_on_success: bool
        Print the compared values when the check passes
    """

    model_config = ConfigDict(frozen=True)

    fatal_on_failure: bool = True
    verbose_on_success: bool = False

    @classmethod
    def from_config(
        cls, config: WitnessConfig, *, fatal: bool | None = None, verbose: bool | None = None
    ) -> CheckMode:
        return cls(
            fatal_on_failure=config.fatal if fatal is None else fatal,
            verbose_on_success=config.verbose if verbose is None else verbose,
        )


class CheckResult(BaseModel):
    """Result of one check.

    Attributes:
    ----------
    location: SourceLocation
        Call site of the check
    expect_equal: bool
        Whether the values were expected to be structurally equal
    passed: bool
        Whether the check passed
    actual: str
        Rendered actual value
    expected: str
        Rendered expected value
    label: str | None
        Case label, for table-driven checks
    message: str | None
        Mismatch description when the check failed
    """

    location: SourceLocation
    expect_equal: bool = True
    passed: bool
    actual: str
    expected: str
    label: str | None = None
    message: str | None = None

    @field_serializer("actual", "expected")
    def _truncate(self, v: str, info: SerializationInfo) -> str:
        """Truncate rendered values to 50 characters when asked to."""
        ctx = info.context or {}
        if ctx.get("truncate"):
            max_len = 50
            if len(v) <= max_len:
                return v
            return v[:max_len] + "..."
        return v

    def __repr__(self) -> str:
        return self.model_dump_json(
            indent=2,
            exclude_none=True,
            context={"truncate": True},
        )

    def __bool__(self) -> bool:
        return self.passed


@dataclass
class ResultCollector:
    """Check results gathered inside a ``collect_results`` block."""

    results: list[CheckResult] = field(default_factory=list)

    @property
    def failures(self) -> list[CheckResult]:
        return [result for result in self.results if not result.passed]

    def raise_for_failures(self) -> None:
        """Raise AssertionError listing every failed check, if there are any."""
        failures = self.failures
        if not failures:
            return
        lines = [f"{len(failures)} of {len(self.results)} checks failed:"]
        lines.extend(f"  {result.location}: {result.message}" for result in failures)
        raise AssertionError("\n".join(lines))


RESULTS_CONTEXT: ContextVar[ResultCollector | None] = ContextVar("witness_results", default=None)


@contextmanager
def collect_results() -> Iterator[ResultCollector]:
    """Collect every check result produced inside the block."""
    collector = ResultCollector()
    token = RESULTS_CONTEXT.set(collector)
    try:
        yield collector
    finally:
        RESULTS_CONTEXT.reset(token)


def record_result(result: CheckResult) -> None:
    collector = RESULTS_CONTEXT.get()
    if collector is not None:
        collector.results.append(result)
