"""Search the trade entries for a date and print the matching amounts."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence, TextIO

from .records import DataEntry, read_entries
from .searching import (
    binary_interpolation_search,
    binary_search,
    interpolation_search,
    matching_entries,
    modified_bis,
    sort_by_date,
)

Search = Callable[[Sequence[DataEntry], str], "tuple[Optional[int], int]"]

_UNSIGNED = 2**32


def _without_hits(
    search: Callable[[Sequence[DataEntry], str], Optional[int]]
) -> Search:
    def run(entries: Sequence[DataEntry], date: str) -> tuple[Optional[int], int]:
        return search(entries, date), 0

    return run


@dataclass(frozen=True)
class _Suite:
    algorithms: tuple[tuple[str, Search], tuple[str, Search]]


_SUITES = {
    "basic": _Suite(
        algorithms=(
            ("Binary Search", _without_hits(binary_search)),
            ("Interpolation Search", _without_hits(interpolation_search)),
        )
    ),
    "bis": _Suite(
        algorithms=(
            ("Modified BIS", modified_bis),
            ("Binary Interpolation Search", binary_interpolation_search),
        )
    ),
}


def format_matches(entries: Sequence[DataEntry], option: int) -> list[str]:
    """Return the lines printed for the entries under a print option.

    Option 1 shows values, 2 cumulative totals, 3 both; any other option
    yields an "Invalid print option" line per entry. Amounts are shown
    as unsigned 32-bit numbers.
    """
    lines: list[str] = []
    for entry in entries:
        value = f"Value: ${entry.value % _UNSIGNED}"
        cumulative = f"Cumulative: ${entry.cumulative % _UNSIGNED}"
        if option == 1:
            lines.append(value)
        elif option == 2:
            lines.append(cumulative)
        elif option == 3:
            lines.extend((value, cumulative))
        else:
            lines.append("Invalid print option")
    return lines


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str]) -> Optional[str]:
    print(prompt, end="", flush=True)
    return next(tokens, None)


def _as_int(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tradesort-search", description="Search trade entries by date."
    )
    parser.add_argument("--input", default="effects.csv", help="CSV file to read")
    parser.add_argument(
        "--suite",
        choices=sorted(_SUITES),
        default="basic",
        help="search algorithms offered (basic: binary/interpolation; bis: BIS variants)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive date search; returns the exit status."""
    args = _parser().parse_args(argv)
    suite = _SUITES[args.suite]

    try:
        entries = read_entries(args.input)
    except OSError:
        print(f"Error opening {args.input}")
        return 1
    except ValueError as exc:
        print(exc)
        return 1

    tokens = _tokens(sys.stdin)
    ordered: Optional[list[DataEntry]] = None

    while True:
        print("Select a search algorithm:")
        for number, (name, _) in enumerate(suite.algorithms, start=1):
            print(f"{number}. {name}")
        token = _ask("Enter your choice: ", tokens)
        if token is None:
            return 0
        choice = _as_int(token)
        if choice not in (1, 2):
            print("Invalid search algorithm")
            continue

        date = _ask("Enter a date (DD/MM/YYYY): ", tokens)
        if date is None:
            return 0
        print(f"Search Date: {date}")
        print("Please wait while the file is being sorted(~45 seconds)", end="")
        if ordered is None:
            ordered = sort_by_date(entries)
        print("Sorted")

        _, search = suite.algorithms[choice - 1]
        try:
            index, count = search(ordered, date)
        except ValueError:
            index, count = None, 0

        if index is not None:
            print("Select information to print:")
            print("1. Value")
            print("2. Cumulative")
            print("3. Both")
            raw = _ask("Enter your choice: ", tokens)
            if raw is None:
                return 0
            option = _as_int(raw)
            matches = matching_entries(ordered, index, date)
            for line in format_matches(matches, option if option is not None else 0):
                print(line)
            count += len(matches)
            print(f"Entries found for date {date}: {count}")
        else:
            print(f"No entries found for date {date}")

        answer = _ask(
            "Do you want to continue searching? (1 for Yes, 0 for No): ", tokens
        )
        print("\n----------")
        if answer is None:
            return 0
        keep_going = _as_int(answer)
        if keep_going == 0:
            return 0


if __name__ == "__main__":
    sys.exit(main())