"""A separately chained hash table of values keyed by date."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, TextIO

from .records import read_entries

MAX_SIZE = 11


def hash_date(date: str, size: int) -> int:
    """Hash a date string as the sum of its character codes modulo size."""
    return sum(ord(char) for char in date) % size


@dataclass
class _Record:
    date: str
    value: int


class DateHashTable:
    """Hash table mapping dates to values; new records go to the bucket front."""

    def __init__(self, size: int = MAX_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._buckets: list[list[_Record]] = [[] for _ in range(size)]

    def _bucket(self, date: str) -> list[_Record]:
        return self._buckets[hash_date(date, self.size)]

    def _find(self, date: str) -> _Record:
        for record in self._bucket(date):
            if record.date == date:
                return record
        raise KeyError(date)

    def insert(self, date: str, value: int) -> None:
        """Add a record at the front of its bucket."""
        self._bucket(date).insert(0, _Record(date, value))

    def search(self, date: str) -> int:
        """Return the value of the first record with the date; KeyError if none."""
        return self._find(date).value

    def modify(self, date: str, value: int) -> None:
        """Set the value of the first record with the date; KeyError if none."""
        self._find(date).value = value

    def delete(self, date: str) -> None:
        """Remove the first record with the date; KeyError if none."""
        bucket = self._bucket(date)
        for position, record in enumerate(bucket):
            if record.date == date:
                del bucket[position]
                return
        raise KeyError(date)

    def __contains__(self, date: object) -> bool:
        return isinstance(date, str) and any(
            record.date == date for record in self._bucket(date)
        )

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)


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


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive record menu; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="tradesort-hash", description="Search, modify and delete records by date."
    )
    parser.add_argument("--input", default="effects.csv", help="CSV file to check")
    args = parser.parse_args(argv)

    try:
        read_entries(args.input)
    except OSError:
        print(f"Error opening {args.input}")
        return 1
    except ValueError as exc:
        print(exc)
        return 1

    table = DateHashTable(MAX_SIZE)
    tokens = _tokens(sys.stdin)

    while True:
        print("\n--- MENU ---")
        print("1. Search for a record")
        print("2. Modify a record")
        print("3. Delete a record")
        print("4. Exit")
        token = _ask("Enter your choice: ", tokens)
        if token is None:
            return 0
        choice = _as_int(token)

        if choice == 1:
            date = _ask("Enter the date: ", tokens)
            if date is None:
                return 0
            try:
                print(f"Value for Date {date}: {table.search(date)}")
            except KeyError:
                print(f"Record not found for Date {date}")
        elif choice == 2:
            date = _ask("Enter the date: ", tokens)
            if date is None:
                return 0
            raw = _ask("Enter the new value: ", tokens)
            if raw is None:
                return 0
            value = _as_int(raw)
            if value is None:
                print("Invalid value")
                continue
            try:
                table.modify(date, value)
                print(f"Value modified for Date {date}")
            except KeyError:
                print(f"Record not found for Date {date}")
        elif choice == 3:
            date = _ask("Enter the date: ", tokens)
            if date is None:
                return 0
            try:
                table.delete(date)
                print(f"Record deleted for Date {date}")
            except KeyError:
                print(f"Record not found for Date {date}")
        elif choice == 4:
            print("Exiting the application...")
            return 0
        else:
            print("Invalid choice")


if __name__ == "__main__":
    sys.exit(main())