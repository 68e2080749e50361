"""Demonstrates witness checks on scalars, lists and records.

Run with:
    python examples/witness_example_checks.py
"""

from dataclasses import dataclass

import witness


@dataclass
class Person:
    name: str
    age: int


@witness.exit_on_failure()
def main() -> None:
    witness.check(42, 42, verbose=True)
    witness.check("hello", "world", equal=False, verbose=True, fmt="r")

    slice1 = [1, 2, 3]
    slice2 = [1, 2, 3]
    witness.check(slice1, slice2, verbose=True)

    witness.check(Person("John", 30), Person("John", 30), verbose=True)

    # Soft checks: report every mismatch, then fail once at the end.
    with witness.collect_results() as collector:
        witness.check({"a": 1}, {"a": 1}, fatal=False)
        witness.check([1, 2], [1, 2, 3], fatal=False)
    print(f"{len(collector.failures)} soft failure(s)")


if __name__ == "__main__":
    main()
