"""Sample points and the batch-evaluation helper shared by every
polynomial representation.

Points travel as (x, y) pairs. Point is a NamedTuple, so plain tuples
are accepted wherever a point is expected.
"""

import random
from typing import Iterable, NamedTuple


class Point(NamedTuple):
    x: float
    y: float


def as_points(points: Iterable) -> tuple:
    """Copy an iterable of (x, y) pairs into an owned tuple of Points."""
    return tuple(Point(float(x), float(y)) for x, y in points)


def evaluate_many(poly, xs: Iterable) -> list:
    """Evaluate poly at each x, pairing x with its value.

    poly is anything with an evaluate(x) method. Order is preserved and
    repeated x values are kept.
    """
    return [Point(x, poly.evaluate(x)) for x in xs]


def has_distinct_nodes(points: Iterable) -> bool:
    """True if no two points share an x-coordinate."""
    xs = [p[0] for p in points]
    return len(set(xs)) == len(xs)


def check_distinct_nodes(points: Iterable):
    """Raise ValueError on the first repeated node x-coordinate."""
    seen = set()
    for x, _ in points:
        if x in seen:
            raise ValueError(f"Duplicate interpolation node x={x}")
        seen.add(x)


def random_coefficients(degree: int, low: float = -10.0, high: float = 10.0,
                        rng=None) -> list:
    """Uniform random coefficients c_0..c_degree (constant term first).

    Args:
        degree: Polynomial degree, >= 0.
        low, high: Range each coefficient is drawn from.
        rng: Optional random.Random instance for deterministic tests.
    """
    if degree < 0:
        raise ValueError(f"Degree must be >= 0, got {degree}")
    rng = rng or random
    return [rng.uniform(low, high) for _ in range(degree + 1)]


def random_nodes(n: int, low: float, high: float, rng=None) -> list:
    """n distinct x-coordinates drawn uniformly from [low, high], sorted.

    Raises ValueError if n < 1 or the range is empty.
    """
    if n < 1:
        raise ValueError(f"Need at least one node, got n={n}")
    if not low < high:
        raise ValueError(f"Empty range [{low}, {high}]")
    rng = rng or random
    nodes = set()
    while len(nodes) < n:
        nodes.add(rng.uniform(low, high))
    return sorted(nodes)
