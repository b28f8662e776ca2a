"""Newton divided-difference interpolation.

O(n^2) setup, O(n) per evaluation.
See https://en.wikipedia.org/wiki/Newton_polynomial
"""

from polyinterp.fp import div
from polyinterp.points import as_points, check_distinct_nodes, evaluate_many


def divided_differences(points) -> tuple:
    """Leading diagonal of the divided-difference table.

    points = [(x_0, y_0), ..., (x_{n-1}, y_{n-1})].
    Returns (f[x_0], f[x_0, x_1], ..., f[x_0, ..., x_{n-1}]).

    Built bottom-up in place: after pass j, d[i] holds
    f[x_{i-j}, ..., x_i] for i >= j. Each entry is the same quotient
    (f[x_{i-j+1}..x_i] - f[x_{i-j}..x_{i-1}]) / (x_i - x_{i-j}) as the
    recursive definition, so the results match it exactly.
    A repeated x gives inf or nan.
    """
    n = len(points)
    xs = [p[0] for p in points]
    d = [p[1] for p in points]

    for j in range(1, n):
        for i in range(n - 1, j - 1, -1):
            d[i] = div(d[i] - d[i - 1], xs[i] - xs[i - j])

    return tuple(d)


def newton_eval(xs, ddiffs, x: float) -> float:
    """Evaluate the Newton form at x by forward accumulation.

    p(x) = d[0] + sum_{k>=1} d[k] * (x - x_0) * ... * (x - x_{k-1}),
    with the basis product carried from one term to the next.
    """
    total = 0.0
    prod = 1.0
    for k in range(1, len(ddiffs)):
        prod *= x - xs[k - 1]
        total += ddiffs[k] * prod
    return ddiffs[0] + total


class NewtonInterpolant:
    """Interpolating polynomial through a point set, Newton form."""

    __slots__ = ('_points', '_xs', '_ddiffs')

    def __init__(self, points, ddiffs):
        self._points = as_points(points)
        self._xs = tuple(p[0] for p in self._points)
        self._ddiffs = tuple(ddiffs)

    @classmethod
    def interpolate(cls, points, strict: bool = False) -> 'NewtonInterpolant':
        """Build the interpolant through points.

        Args:
            points: Sequence of (x, y) pairs, at least one.
            strict: Reject repeated node x-coordinates instead of
                producing non-finite differences.

        Raises:
            ValueError: points is empty, or strict and a node repeats.
        """
        points = as_points(points)
        if not points:
            raise ValueError("Need at least one point to interpolate")
        if strict:
            check_distinct_nodes(points)
        return cls(points, divided_differences(points))

    @property
    def points(self) -> tuple:
        return self._points

    @property
    def ddiffs(self) -> tuple:
        return self._ddiffs

    def evaluate(self, x: float) -> float:
        for p in self._points:
            if p.x == x:
                return p.y
        return newton_eval(self._xs, self._ddiffs, x)

    def evaluate_many(self, xs) -> list:
        return evaluate_many(self, xs)

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return f"NewtonInterpolant({list(self._points)!r})"
