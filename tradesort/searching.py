"""Searches over trade entries sorted by date."""

from __future__ import annotations

from typing import Optional, Sequence

from .records import DataEntry, parse_date

_Date = tuple[int, int, int]


def _cmp(first: _Date, second: _Date) -> int:
    return (first > second) - (first < second)


def _dates(entries: Sequence[DataEntry]) -> list[_Date]:
    return [parse_date(entry.date) for entry in entries]


def sort_by_date(entries: Sequence[DataEntry]) -> list[DataEntry]:
    """Return the entries ordered by ascending date (Lomuto quicksort)."""
    arr = list(entries)
    keys = _dates(arr)
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = keys[high]
        boundary = low - 1
        for j in range(low, high):
            if keys[j] <= pivot:
                boundary += 1
                arr[boundary], arr[j] = arr[j], arr[boundary]
                keys[boundary], keys[j] = keys[j], keys[boundary]
        split = boundary + 1
        arr[split], arr[high] = arr[high], arr[split]
        keys[split], keys[high] = keys[high], keys[split]
        pending.append((split + 1, high))
        pending.append((low, split - 1))
    return arr


def binary_search(entries: Sequence[DataEntry], date: str) -> Optional[int]:
    """Return the index of the first entry with the given date, or None."""
    target = parse_date(date)
    keys = _dates(entries)
    low, high = 0, len(keys) - 1
    found: Optional[int] = None
    while low <= high:
        mid = (low + high) // 2
        comparison = _cmp(keys[mid], target)
        if comparison == 0:
            found = mid
            high = mid - 1
        elif comparison < 0:
            low = mid + 1
        else:
            high = mid - 1
    return found


def interpolation_search(entries: Sequence[DataEntry], date: str) -> Optional[int]:
    """Interpolation search on date-sorted entries; the index found, or None.

    The search stops as soon as the bounds of the remaining range share a
    date, so a range holding a single date is never probed.
    """
    target = parse_date(date)
    keys = _dates(entries)
    low, high = 0, len(keys) - 1
    found: Optional[int] = None
    while (
        low <= high
        and _cmp(keys[low], keys[high]) != 0
        and _cmp(target, keys[low]) >= 0
        and _cmp(target, keys[high]) <= 0
    ):
        pos = low + (high - low) * _cmp(target, keys[low]) // _cmp(keys[high], keys[low])
        comparison = _cmp(keys[pos], target)
        if comparison == 0:
            found = pos
            high = pos - 1
        elif comparison < 0:
            low = pos + 1
        else:
            high = pos - 1
    return found


def modified_bis(entries: Sequence[DataEntry], date: str) -> tuple[Optional[int], int]:
    """Exponential leaps followed by a binary search.

    Returns the index found (or None) and the number of hits recorded,
    which is 1 when a match was found and 0 otherwise.
    """
    target = parse_date(date)
    keys = _dates(entries)
    low, high = 0, len(keys) - 1
    leap = 1
    while (
        low <= high
        and _cmp(keys[low], keys[high]) != 0
        and _cmp(target, keys[low]) >= 0
        and _cmp(target, keys[high]) <= 0
    ):
        pos = min(low + leap, high)
        if _cmp(keys[pos], target) <= 0:
            low = pos
            leap *= 2
        else:
            high = pos - 1
            break

    while low <= high:
        mid = (low + high) // 2
        comparison = _cmp(keys[mid], target)
        if comparison == 0:
            return mid, 1
        if comparison < 0:
            low = mid + 1
        else:
            high = mid - 1
    return None, 0


def binary_interpolation_search(
    entries: Sequence[DataEntry], date: str
) -> tuple[Optional[int], int]:
    """Binary interpolation search on date-sorted entries.

    Returns the last index found (or None) and the number of matches met
    while searching.
    """
    target = parse_date(date)
    keys = _dates(entries)
    low, high = 0, len(keys) - 1
    found: Optional[int] = None
    hits = 0
    while (
        low <= high
        and _cmp(target, keys[low]) >= 0
        and _cmp(target, keys[high]) <= 0
    ):
        span = _cmp(keys[high], keys[low])
        if span == 0:
            pos = low
        else:
            pos = low + (high - low) * _cmp(target, keys[low]) // span
        comparison = _cmp(keys[pos], target)
        if comparison == 0:
            found = pos
            low = pos + 1
            hits += 1
        if comparison < 0:
            low = pos + 1
        else:
            high = pos - 1
    return found, hits


def count_entries(entries: Sequence[DataEntry], date: str) -> int:
    """Count the entries that carry the given date."""
    target = parse_date(date)
    return sum(1 for key in _dates(entries) if key == target)


def matching_entries(
    entries: Sequence[DataEntry], index: int, date: str
) -> list[DataEntry]:
    """Collect the run of entries with the given date around index.

    Entries are listed from index downwards, then from index + 1 upwards.
    """
    target = parse_date(date)
    matches: list[DataEntry] = []
    for position in range(index, -1, -1):
        if parse_date(entries[position].date) != target:
            break
        matches.append(entries[position])
    for position in range(index + 1, len(entries)):
        if parse_date(entries[position].date) != target:
            break
        matches.append(entries[position])
    return matches