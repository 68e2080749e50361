"""Compare the running time of code blocks."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from witness.errors import StackDepthError
from witness.introspection import resolve_call_site
from witness.reporting import BENCHMARK_STYLE, emit, separator, styled

logger = logging.getLogger(__name__)


class BenchmarkResult(BaseModel):
    """Total running time of one block."""

    model_config = ConfigDict(frozen=True)

    block_index: int = Field(ge=0)
    duration_ms: float = Field(ge=0)
    iterations: int = Field(ge=1)

    @property
    def average_ms(self) -> float:
        return self.duration_ms / self.iterations


def format_duration(ms: float) -> str:
    """Render milliseconds with a readable unit."""
    if ms >= 1000:
        return f"{ms / 1000:.3f}s"
    if ms >= 1:
        return f"{ms:.3f}ms"
    if ms >= 0.001:
        return f"{ms * 1000:.3f}µs"
    return f"{ms * 1_000_000:.0f}ns"


def benchmark(
    iterations: int,
    *blocks: Callable[[], object],
    clock: Callable[[], float] = time.perf_counter,
    stacklevel: int = 1,
) -> list[BenchmarkResult]:
    """Run each block ``iterations`` times and report them fastest first.

    Blocks run one after another; each block's time covers all of its
    iterations. Blocks with equal times keep their original order.

    Args:
        iterations: Number of times each block is called.
        *blocks: Zero-argument callables to time.
        clock: Seconds counter used for timing.
        stacklevel: Which caller to report as the call site.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    if stacklevel < 1:
        raise StackDepthError(f"stacklevel must be >= 1, got {stacklevel}")
    for index, block in enumerate(blocks):
        if not callable(block):
            raise TypeError(f"block {index} is not callable: {block!r}")

    results: list[BenchmarkResult] = []
    for index, block in enumerate(blocks):
        start = clock()
        for _ in range(iterations):
            block()
        elapsed_ms = (clock() - start) * 1000
        logger.debug("Block %d ran %d times in %.3fms", index, iterations, elapsed_ms)
        results.append(BenchmarkResult(block_index=index, duration_ms=elapsed_ms, iterations=iterations))

    ranked = sorted(results, key=lambda r: r.duration_ms)

    location = resolve_call_site(stacklevel)
    emit(
        styled(str(location), BENCHMARK_STYLE),
        *(
            styled(
                f"block index {r.block_index}: it takes {format_duration(r.duration_ms)}"
                f" and {format_duration(r.average_ms)} for each loop"
            )
            for r in ranked
        ),
        separator(),
    )
    return ranked
