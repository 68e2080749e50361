import time

import pytest

from witness import BenchmarkResult, benchmark
from witness.benchmark import format_duration


class FakeClock:
    """Seconds counter advanced by the benchmarked blocks."""

    def __init__(self) -> None:
        self.now_ms = 0

    def __call__(self) -> float:
        return self.now_ms / 1000

    def block(self, ms: int):
        def run() -> None:
            self.now_ms += ms

        return run


def test_results_are_sorted_by_duration_with_original_indices():
    clock = FakeClock()

    results = benchmark(1, clock.block(50), clock.block(10), clock.block(500), clock=clock)

    assert [r.block_index for r in results] == [1, 0, 2]
    assert [r.duration_ms for r in results] == pytest.approx([10, 50, 500])


def test_duration_covers_every_iteration_and_average_divides_it():
    clock = FakeClock()
    calls = []

    def counted() -> None:
        calls.append(1)
        clock.now_ms += 2

    (result,) = benchmark(4, counted, clock=clock)

    assert len(calls) == 4
    assert result.iterations == 4
    assert result.duration_ms == pytest.approx(8)
    assert result.average_ms == pytest.approx(2)


def test_ties_keep_original_order():
    clock = FakeClock()

    results = benchmark(2, clock.block(5000), clock.block(1000), clock.block(5000), clock.block(1000), clock=clock)

    assert [r.block_index for r in results] == [1, 3, 0, 2]


def test_blocks_run_sequentially():
    order = []

    benchmark(2, lambda: order.append("a"), lambda: order.append("b"))

    assert order == ["a", "a", "b", "b"]


def test_report_lists_blocks_fastest_first(output):
    clock = FakeClock()

    benchmark(10, clock.block(300), clock.block(20), clock=clock)

    lines = [line for line in output.getvalue().splitlines() if line.startswith("block index")]
    assert lines == [
        "block index 1: it takes 200.000ms and 20.000ms for each loop",
        "block index 0: it takes 3.000s and 300.000ms for each loop",
    ]
    assert "test_benchmark.py:" in output.getvalue()


def test_real_sleeps_rank_in_duration_order():
    results = benchmark(
        1,
        lambda: time.sleep(0.03),
        lambda: time.sleep(0.005),
        lambda: time.sleep(0.06),
    )

    assert [r.block_index for r in results] == [1, 0, 2]
    assert results[0].duration_ms >= 5


def test_no_blocks_returns_empty_list():
    assert benchmark(3) == []


@pytest.mark.parametrize("iterations", [0, -1])
def test_rejects_non_positive_iterations(iterations):
    with pytest.raises(ValueError):
        benchmark(iterations, lambda: None)


def test_rejects_non_callable_blocks():
    with pytest.raises(TypeError, match="block 1"):
        benchmark(1, lambda: None, "not a block")


@pytest.mark.parametrize(
    ("ms", "expected"),
    [
        (2500, "2.500s"),
        (12.5, "12.500ms"),
        (0.25, "250.000µs"),
        (0.0004, "400ns"),
    ],
)
def test_format_duration_picks_unit(ms, expected):
    assert format_duration(ms) == expected


def test_benchmark_result_average():
    assert BenchmarkResult(block_index=0, duration_ms=9, iterations=3).average_ms == 3
