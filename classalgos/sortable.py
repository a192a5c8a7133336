"""Integer arrays with Shell sort, Hoare quicksort and a multiset comparison."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections import Counter
from collections.abc import Iterable, Iterator
from enum import IntEnum
from typing import TextIO


class Order(IntEnum):
    """How a randomly generated array is arranged."""

    UNORDERED = 1
    ASCENDING = 2
    DESCENDING = 3


class IntArray:
    """A mutable sequence of integers that knows how to sort itself in place."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items = [int(v) for v in values]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def _resolve(self, index: int) -> int:
        # Any index outside 0..len-1 (negative ones included) falls back to the first slot.
        if not self._items:
            raise IndexError("array is empty")
        return index if 0 <= index < len(self._items) else 0

    def __getitem__(self, index: int) -> int:
        """Return the element at ``index``; out-of-range indices yield the first element."""
        return self._items[self._resolve(index)]

    def __setitem__(self, index: int, value: int) -> None:
        """Store ``value`` at ``index``; out-of-range indices write the first element."""
        self._items[self._resolve(index)] = int(value)

    def __eq__(self, other: object) -> bool:
        """Two arrays are equal when they hold the same elements, in any order."""
        if not isinstance(other, IntArray):
            return NotImplemented
        return len(self) == len(other) and Counter(self._items) == Counter(other._items)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"IntArray({self._items!r})"

    def __str__(self) -> str:
        return " ".join(str(v) for v in self._items)

    def is_sorted(self) -> bool:
        """Return True if the elements are in non-decreasing order."""
        return all(a <= b for a, b in zip(self._items, self._items[1:]))

    def shell_sort(self) -> None:
        """Sort in place with Shell's method, halving the gap each round."""
        items = self._items
        gap = len(items) // 2
        while gap > 0:
            for i in range(gap, len(items)):
                x = items[i]
                k = i - gap
                while k >= 0 and items[k] > x:
                    items[k + gap] = items[k]
                    k -= gap
                items[k + gap] = x
            gap //= 2

    def hoare_sort(self) -> None:
        """Sort in place with Hoare's quicksort, pivoting on the middle element."""
        items = self._items
        pending = [(0, len(items) - 1)]
        while pending:
            left, right = pending.pop()
            if left >= right:
                continue
            i, j = left, right
            pivot = items[(left + right) // 2]
            while i <= j:
                while items[i] < pivot:
                    i += 1
                while items[j] > pivot:
                    j -= 1
                if i <= j:
                    items[i], items[j] = items[j], items[i]
                    i += 1
                    j -= 1
            pending.append((i, right))
            pending.append((left, j))

    def copy(self) -> IntArray:
        """Return an independent copy."""
        return IntArray(self._items)


def random_array(
    length: int = 1,
    order: Order | int = Order.UNORDERED,
    spread: int = 10,
    rng: random.Random | None = None,
) -> IntArray:
    """Build a pseudo-random array.

    Unordered arrays hold values in ``range(spread)``; ordered ones grow by
    steps drawn from that range.
    """
    order = Order(order)
    if length < 0:
        raise ValueError("length must not be negative")
    if spread <= 0:
        raise ValueError("spread must be positive")
    rng = rng or random.Random()
    if order is Order.UNORDERED:
        return IntArray(rng.randrange(spread) for _ in range(length))
    values: list[int] = []
    for _ in range(length):
        step = rng.randrange(spread)
        values.append(values[-1] + step if values else step)
    if order is Order.DESCENDING:
        values.reverse()
    return IntArray(values)


def benchmark(array: IntArray | None = None) -> dict[str, float]:
    """Time both sorts on copies of ``array``; results are in milliseconds.

    Without an array, a descending array of 100 elements is used.
    """
    if array is None:
        array = random_array(100, Order.DESCENDING)
    timings: dict[str, float] = {}
    for name in ("shell_sort", "hoare_sort"):
        subject = array.copy()
        start = time.perf_counter()
        getattr(subject, name)()
        timings[name] = (time.perf_counter() - start) * 1000.0
    return timings


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv: list[str] | None = None) -> int:
    """Read an array from standard input, check it, sort it and time both sorts."""
    parser = argparse.ArgumentParser(
        description="Read an array from standard input and sort it."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("length: ", end="")
        length = _next_int(tokens)
        if length < 0:
            raise ValueError("length must not be negative")
        print("\n array: ", end="")
        array = IntArray(_next_int(tokens) for _ in range(length))

        if array.is_sorted():
            print("\ntest result: true (the array is sorted in non-decreasing order)")
            return 0
        print("\ntest result: false (the array is not sorted in non-decreasing order)")

        print(
            "sort selection: \n for Shell_sort - 1 \n for Hoar_sort - 2 \n"
            " for Heap_sort - 3 \nchoosen sort: ",
            end="",
        )
        choice = _next_int(tokens)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    if choice == 1:
        array.shell_sort()
    elif choice == 2:
        array.hoare_sort()
    elif choice == 3:
        return 0
    else:
        print("\nthere is no such sorting")
        return 0

    print(f"sort result: {array}")
    timings = benchmark()
    print(f"{timings['shell_sort']} ms by Shell_sort")
    print(f"{timings['hoare_sort']} ms by Hoar_sort")
    return 0