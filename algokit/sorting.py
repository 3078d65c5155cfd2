"""Classic comparison sorts and the shifting-sort action planner."""

from __future__ import annotations

from typing import Iterable, NamedTuple


class Shift(NamedTuple):
    """A left cyclic shift of the 1-based segment [left, right] by offset."""

    left: int
    right: int
    offset: int


def bubble_sort(values: Iterable) -> list:
    """Return a new ascending list using bubble sort."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for d in range(n - done - 1):
            if items[d] > items[d + 1]:
                items[d], items[d + 1] = items[d + 1], items[d]
    return items


def selection_sort(values: Iterable) -> list:
    """Return a new ascending list using selection sort."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Return a new ascending list using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def shell_sort(values: Iterable) -> list:
    """Return a new ascending list using Shell sort with halving gaps."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def shifting_sort(values: Iterable) -> list[Shift]:
    """Plan the segment shifts that sort ``values`` ascending.

    Each step moves the smallest remaining element to the front of the
    unsorted part; it is reported as a left shift of the segment by
    ``right - left`` positions.
    """
    items = list(values)
    actions: list[Shift] = []
    for i in range(len(items)):
        pos = min(range(i, len(items)), key=items.__getitem__)
        if pos > i:
            actions.append(Shift(i + 1, pos + 1, pos - i))
            items.insert(i, items.pop(pos))
    return actions