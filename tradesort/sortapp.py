"""Sort the trade entries by value or cumulative total and write a report."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO, Union

from .records import DataEntry, read_entries
from .sorting import counting_sort, heap_sort, merge_sort, quick_sort

Key = Callable[[DataEntry], int]
Sorter = Callable[[Sequence[DataEntry], Key], list]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _by_value(entry: DataEntry) -> int:
    return entry.value


def _by_cumulative(entry: DataEntry) -> int:
    return entry.cumulative


def _counting(entries: Sequence[DataEntry], key: Key) -> list:
    max_value = max((key(entry) for entry in entries), default=0)
    return counting_sort(entries, key, max_value)


@dataclass(frozen=True)
class _Mode:
    key: Key
    value_prefix: str
    algorithms: tuple[tuple[str, Sorter], tuple[str, Sorter]]
    invalid_is_fatal: bool


_MODES = {
    "value": _Mode(
        key=_by_value,
        value_prefix="$ ",
        algorithms=(("Counting Sort", _counting), ("Merge Sort", merge_sort)),
        invalid_is_fatal=False,
    ),
    "cumulative": _Mode(
        key=_by_cumulative,
        value_prefix="$",
        algorithms=(("Heap Sort", heap_sort), ("Quick Sort", quick_sort)),
        invalid_is_fatal=True,
    ),
}


def write_report(
    entries: Sequence[DataEntry],
    path: Union[str, "PathLike[str]"],
    key: Key,
    value_prefix: str = "$ ",
) -> int:
    """Write the entries and an ordering check to path.

    Returns the number of neighbouring pairs found out of order by key.
    """
    errors = 0
    with open(path, "w", encoding="utf-8") as out:
        out.write("Sorted entries in ascending order: \n")
        for entry in entries:
            out.write(
                f"{entry.direction}; {entry.year}; {entry.date}; {entry.weekday}; "
                f"{entry.country}; {entry.commodity}; {entry.transport_mode}; "
                f"{entry.measure}; {value_prefix}{entry.value}; {entry.cumulative}\n"
            )
        for previous, current in zip(entries, entries[1:]):
            if key(current) < key(previous):
                out.write("Error: Entries are not sorted correctly\n")
                errors += 1
        out.write(f"Errors: {errors}\n")
    return errors


def _read_choice(stream: TextIO) -> Optional[int]:
    line = stream.readline()
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tradesort-sort", description="Sort trade entries and write a report."
    )
    parser.add_argument("--input", default="effects.csv", help="CSV file to read")
    parser.add_argument(
        "--output", default="sorted_entries.txt", help="report file to write"
    )
    parser.add_argument(
        "--by",
        choices=sorted(_MODES),
        default="value",
        help="field to sort on (value: counting/merge; cumulative: heap/quick)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive sorting program; returns the exit status."""
    args = _parser().parse_args(argv)
    mode = _MODES[args.by]
    output = Path(args.output)

    try:
        entries = read_entries(args.input)
    except OSError:
        print(f"Error opening {args.input}")
        return 1
    except ValueError as exc:
        print(exc)
        return 1

    print("\nSorting Options:")
    for number, (name, _) in enumerate(mode.algorithms, start=1):
        print(f"{number}. {name}")
    print("3. Terminate")
    print("Enter your choice: ", end="", flush=True)
    choice = _read_choice(sys.stdin)

    if choice in (1, 2):
        name, sorter = mode.algorithms[choice - 1]
        try:
            entries = sorter(entries, mode.key)
        except ValueError as exc:
            print(exc)
            return 1
        print(f"{name} has been applied.")
    elif choice == 3:
        print("Terminating the program.")
        return 0
    else:
        print("Invalid choice. Please try again.")
        if mode.invalid_is_fatal:
            return 1

    try:
        write_report(entries, output, mode.key, mode.value_prefix)
    except OSError:
        print("Error opening output file")
        return 1

    print(f"Sorted entries have been printed to the {output.name} file", end="")
    if sys.platform == "win32":
        subprocess.Popen(["notepad", str(output)])
        print()
    else:
        print(f"Please open the file {output.name} manually.")
    return 0


if __name__ == "__main__":
    sys.exit(main())