"""Demonstrates debug printing with the source text of the printed expression.

Run with:
    python examples/witness_example_debug.py
"""

import witness


def main() -> None:
    names = ["Samuel", "John", "Samuel"]
    witness.debug("", names)
    witness.debug("r", names[0])

    age = 10
    witness.debug("x", age)
    witness.debug("s", witness.stack())


if __name__ == "__main__":
    main()
