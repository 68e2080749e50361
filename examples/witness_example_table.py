"""Demonstrates table-driven checks; matching rows print nothing.

Run with:
    python examples/witness_example_table.py
"""

import witness


def letter_hints(secret: str, guess: str) -> str:
    hints = []
    for index, letter in enumerate(guess):
        if secret[index] == letter:
            hints.append("@")
        elif letter in secret:
            hints.append("*")
        else:
            hints.append("-")
    return "".join(hints)


CASES = [
    witness.TableCase(label="exact", input=("abc", "abc"), expected="@@@"),
    witness.TableCase(label="one wrong", input=("abc", "abd"), expected="@@-"),
    witness.TableCase(label="shuffled", input=("abc", "cab"), expected="***"),
    witness.TableCase(label="mixed", input=("truism", "trusty"), expected="@@@**-"),
]


@witness.exit_on_failure()
def main() -> None:
    ran = witness.run_table(lambda pair: letter_hints(*pair), CASES, fmt="r")
    print(f"{ran} cases passed")

    witness.report_case("r", "single row", ("abc", "zzz"), "---", letter_hints("abc", "zzz"))


if __name__ == "__main__":
    main()
