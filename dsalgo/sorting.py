"""Comparison sorts: bubble, heap, insertion, merge, quick and selection."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterable
from typing import Any

MAX = 100_000
RAND_MAX = 2**31 - 1


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list, bubbling the largest item to the end each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _sift_down(items: list[Any], i: int, n: int) -> None:
    """Restore the max-heap property below index ``i`` in ``items[:n]``."""
    while True:
        left, right = 2 * i + 1, 2 * i + 2
        largest = i
        if left < n and items[left] > items[largest]:
            largest = left
        if right < n and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        items[i], items[largest] = items[largest], items[i]
        i = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list built by repeatedly extracting a heap's maximum."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, i, n)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list, inserting each item into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge_sort(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    left = _merge_sort(items[:middle])
    right = _merge_sort(items[middle:])
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list by splitting in halves and merging them."""
    return _merge_sort(list(values))


def _partition(items: list[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around its first item; return its place."""
    pivot = items[low]
    x, y = low, high
    while x < y:
        while x <= high and items[x] <= pivot:
            x += 1
        while items[y] > pivot:
            y -= 1
        if x < y:
            items[x], items[y] = items[y], items[x]
    items[low], items[y] = items[y], items[low]
    return y


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list by partitioning around the first item of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list, moving the least remaining item forward each pass."""
    items = list(values)
    n = len(items)
    for i in range(n):
        position = min(range(i, n), key=items.__getitem__)
        if position != i:
            items[i], items[position] = items[position], items[i]
    return items


SORTS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "bubble": bubble_sort,
    "heap": heap_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "selection": selection_sort,
}


def _display(items: Iterable[Any]) -> None:
    print("".join(f"{item}  " for item in items))


def main(argv: list[str] | None = None) -> int:
    """Sort ``n`` random integers with a chosen algorithm and time it."""
    parser = argparse.ArgumentParser(
        description="Sort random integers and report the time taken."
    )
    parser.add_argument("n", type=int, nargs="?", help="how many numbers to sort")
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(SORTS), default="quick"
    )
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    n = args.n
    if n is None:
        try:
            n = int(input("Enter n: ").strip())
        except (ValueError, EOFError):
            parser.error("n must be an integer")
    if not 0 <= n <= MAX:
        parser.error(f"n must be between 0 and {MAX}")

    rng = random.Random(args.seed)
    numbers = [rng.randint(0, RAND_MAX) for _ in range(n)]
    _display(numbers)
    start = time.perf_counter()
    ordered = SORTS[args.algorithm](numbers)
    elapsed = time.perf_counter() - start
    print("After Sorting: ")
    _display(ordered)
    print(f"The time taken is {elapsed:.6f} sec")
    return 0


if __name__ == "__main__":
    sys.exit(main())