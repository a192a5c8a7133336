"""Brute-force travelling-salesman search over cyclic routes."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator, Sequence

Matrix = Sequence[Sequence[int]]


class Route:
    """A closed tour through cities numbered from 1 to ``size``."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("route size must not be negative")
        self._stops = list(range(1, size + 1))

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[int]:
        return iter(self._stops)

    def __repr__(self) -> str:
        return f"Route({self._stops!r})"

    def __str__(self) -> str:
        return " ".join(str(city) for city in self._stops)

    def price(self, matrix: Matrix) -> int:
        """Return the cost of the tour, including the way back to the start."""
        stops = self._stops
        if not stops:
            raise ValueError("an empty route has no price")
        legs = zip(stops, stops[1:] + stops[:1])
        return sum(matrix[a - 1][b - 1] for a, b in legs)

    def next_route(self) -> bool:
        """Advance to the next permutation in lexicographic order.

        Returns False when there is no next permutation or when the new one
        no longer starts at city 1; tours are cyclic, so the rest are repeats.
        """
        stops = self._stops
        pivot = next(
            (i for i in range(len(stops) - 2, -1, -1) if stops[i] < stops[i + 1]),
            None,
        )
        if pivot is None:
            return False
        swap = next(
            j for j in range(len(stops) - 1, pivot, -1) if stops[pivot] < stops[j]
        )
        stops[pivot], stops[swap] = stops[swap], stops[pivot]
        stops[pivot + 1 :] = reversed(stops[pivot + 1 :])
        return stops[0] == 1

    def copy(self) -> Route:
        """Return an independent copy."""
        clone = Route()
        clone._stops = list(self._stops)
        return clone


def random_matrix(size: int, rng: random.Random | None = None) -> list[list[int]]:
    """Build a ``size`` x ``size`` cost matrix with entries from 1 to 9."""
    if size < 0:
        raise ValueError("matrix size must not be negative")
    rng = rng or random.Random()
    return [[rng.randint(1, 9) for _ in range(size)] for _ in range(size)]


def _tours(matrix: Matrix) -> Iterator[tuple[Route, int]]:
    route = Route(len(matrix))
    yield route.copy(), route.price(matrix)
    while route.next_route():
        yield route.copy(), route.price(matrix)


def solve(matrix: Matrix) -> tuple[Route, int]:
    """Return the cheapest tour starting at city 1 and its cost.

    Among tours of equal cost the first one found is kept; tours of cost
    zero or less never replace the starting tour.
    """
    best: Route | None = None
    best_cost = 0
    for route, cost in _tours(matrix):
        if best is None or (best_cost > cost and cost > 0):
            best, best_cost = route, cost
    assert best is not None
    return best, best_cost


def main(argv: list[str] | None = None) -> int:
    """Read the number of cities, print a random cost matrix and every tour."""
    parser = argparse.ArgumentParser(
        description="Solve a random travelling-salesman instance by brute force."
    )
    parser.parse_args(argv)
    print("N = ", end="")
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise ValueError("unexpected end of input")
        size = int(tokens[0])
        matrix = random_matrix(size)
        for row in matrix:
            print(" ".join(str(v) for v in row))
        print()
        best: Route | None = None
        best_cost = 0
        for route, cost in _tours(matrix):
            print(f"{route} = {cost}")
            if best is None or (best_cost > cost and cost > 0):
                best, best_cost = route, cost
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print(f"\nBest route : {best}")
    return 0