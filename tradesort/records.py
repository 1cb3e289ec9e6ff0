"""Trade records read from the effects CSV file, and date helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Union

_FIELD = r"([^,]+)"
_INT = r"\s*([+-]?\d+)"
_UINT = r"\s*\+?(\d+)"

_PLAIN_LINE = re.compile(
    r"\s*" + ",".join(
        [_FIELD, _INT, _FIELD, _FIELD, _FIELD, _FIELD, _FIELD, _FIELD, _INT, _UINT]
    )
)
_QUOTED_LINE = re.compile(
    r"\s*" + ",".join(
        [_FIELD, _INT, _FIELD, _FIELD, _FIELD, r'"([^"]+)"', _FIELD, _FIELD, _INT, _UINT]
    )
)
_DATE = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")


@dataclass
class DataEntry:
    """One row of the trade effects data set."""

    direction: str
    year: int
    date: str
    weekday: str
    country: str
    commodity: str
    transport_mode: str
    measure: str
    value: int
    cumulative: int


def parse_line(line: str) -> DataEntry:
    """Parse one data line of the CSV file.

    A line holding a double quote is read with the commodity field quoted,
    so that it may contain commas. Raises ValueError on a malformed line.
    """
    pattern = _QUOTED_LINE if '"' in line else _PLAIN_LINE
    match = pattern.match(line)
    if match is None:
        raise ValueError(f"Error reading data from line: {line}")
    (direction, year, date, weekday, country, commodity,
     transport_mode, measure, value, cumulative) = match.groups()
    return DataEntry(
        direction=direction,
        year=int(year),
        date=date,
        weekday=weekday,
        country=country,
        commodity=commodity,
        transport_mode=transport_mode,
        measure=measure,
        value=int(value),
        cumulative=int(cumulative),
    )


def read_entries(path: Union[str, "PathLike[str]"]) -> list[DataEntry]:
    """Read every entry of a CSV file, skipping its header line.

    Raises ValueError when the header is missing or a line is malformed,
    and OSError when the file cannot be opened.
    """
    with open(path, "r", encoding="utf-8") as handle:
        header = handle.readline()
        if not header:
            raise ValueError("Error reading headers")
        return [parse_line(line) for line in handle]


def parse_date(text: str) -> tuple[int, int, int]:
    """Parse a DD/MM/YYYY date into a (year, month, day) tuple."""
    match = _DATE.match(text)
    if match is None:
        raise ValueError(f"Invalid date: {text!r}")
    day, month, year = (int(part) for part in match.groups())
    return year, month, day


def compare_dates(date1: str, date2: str) -> int:
    """Compare two DD/MM/YYYY dates, returning -1, 0 or 1."""
    first = parse_date(date1)
    second = parse_date(date2)
    return (first > second) - (first < second)