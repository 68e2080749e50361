"""Demonstrates ranking code blocks by running time.

Run with:
    python examples/witness_example_benchmark.py
"""

import time

import witness


def main() -> None:
    witness.benchmark(
        5,
        lambda: time.sleep(0.010),
        lambda: time.sleep(0.050),
        lambda: time.sleep(0.001),
    )

    witness.benchmark(
        10_000,
        lambda: "-".join(str(n) for n in range(20)),
        lambda: "-".join(map(str, range(20))),
    )


if __name__ == "__main__":
    main()
