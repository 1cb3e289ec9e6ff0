"""Sorting algorithms over sequences ordered by an integer key."""

from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")
KeyFunc = Optional[Callable[[T], int]]


def _key_of(key: KeyFunc) -> Callable[[T], int]:
    return key if key is not None else (lambda item: item)


def counting_sort(items: Sequence[T], key: KeyFunc = None, max_value: int = 0) -> list[T]:
    """Return a stable sort of items by key, for keys in 0..max_value.

    Raises ValueError if a key falls outside that range.
    """
    get = _key_of(key)
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    keys = [get(item) for item in items]
    counts = [0] * (max_value + 1)
    for value in keys:
        if not 0 <= value <= max_value:
            raise ValueError(f"key {value} outside range 0..{max_value}")
        counts[value] += 1
    total = 0
    for value, count in enumerate(counts):
        total += count
        counts[value] = total
    result: list[Optional[T]] = [None] * len(items)
    for item, value in zip(reversed(items), reversed(keys)):
        counts[value] -= 1
        result[counts[value]] = item
    return result  # type: ignore[return-value]


def merge_sort(items: Sequence[T], key: KeyFunc = None) -> list[T]:
    """Return a stable top-down merge sort of items by key."""
    get = _key_of(key)

    def sort(part: list[T]) -> list[T]:
        if len(part) <= 1:
            return part
        mid = (len(part) - 1) // 2 + 1
        return merge(sort(part[:mid]), sort(part[mid:]))

    def merge(left: list[T], right: list[T]) -> list[T]:
        merged: list[T] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if get(left[i]) <= get(right[j]):
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged

    return sort(list(items))


def heap_sort(items: Sequence[T], key: KeyFunc = None) -> list[T]:
    """Return items sorted ascending by key using a binary max-heap."""
    get = _key_of(key)
    arr = list(items)

    def sift_down(size: int, root: int) -> None:
        while True:
            largest = root
            left, right = 2 * root + 1, 2 * root + 2
            if left < size and get(arr[left]) > get(arr[largest]):
                largest = left
            if right < size and get(arr[right]) > get(arr[largest]):
                largest = right
            if largest == root:
                return
            arr[root], arr[largest] = arr[largest], arr[root]
            root = largest

    n = len(arr)
    for root in range(n // 2 - 1, -1, -1):
        sift_down(n, root)
    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        sift_down(end, 0)
    return arr


def quick_sort(items: Sequence[T], key: KeyFunc = None) -> list[T]:
    """Return items sorted ascending by key using Lomuto-partition quicksort."""
    get = _key_of(key)
    arr = list(items)
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = get(arr[high])
        boundary = low - 1
        for j in range(low, high):
            if get(arr[j]) < pivot:
                boundary += 1
                arr[boundary], arr[j] = arr[j], arr[boundary]
        split = boundary + 1
        arr[split], arr[high] = arr[high], arr[split]
        pending.append((split + 1, high))
        pending.append((low, split - 1))
    return arr