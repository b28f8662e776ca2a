"""Lagrange interpolation in barycentric form.

Weights are precomputed once per node set, O(n^2); each evaluation is
then O(n). See https://en.wikipedia.org/wiki/Lagrange_polynomial#Barycentric_form

Node x-coordinates are expected to be pairwise distinct. They are not
checked unless strict=True: a repeated x silently drops the zero
factor from the weight product, which changes the interpolant rather
than reporting the ill-posed problem.
"""

from typing import NamedTuple

from polyinterp.fp import div
from polyinterp.points import Point, as_points, check_distinct_nodes, evaluate_many


class BaryTerm(NamedTuple):
    """One node of the barycentric form with its weight."""
    point: Point
    w: float


def barycentric_weights(points) -> tuple:
    """Compute w_i = prod_j (x_i - x_j) over the factors that are not zero.

    points = [(x_0, y_0), ..., (x_{n-1}, y_{n-1})].
    Zero factors are filtered rather than skipping j == i, so duplicate
    node x-coordinates drop out of the product too.
    """
    xs = [p[0] for p in points]
    weights = []
    for xi in xs:
        w = 1.0
        for xj in xs:
            d = xi - xj
            if d != 0:
                w *= d
        weights.append(w)
    return tuple(weights)


def barycentric_eval(terms, x: float) -> float:
    """Evaluate the barycentric form at x.

    Returns the stored y of the first node whose x equals x exactly.
    Otherwise returns N / D with
      N = sum_i y_i / ((x - x_i) * w_i),  D = sum_i 1 / ((x - x_i) * w_i).
    A zero D (only reachable from degenerate nodes) gives inf or nan.
    """
    for term in terms:
        if term.point.x == x:
            return term.point.y

    num = 0.0
    den = 0.0
    for (xi, yi), w in terms:
        t = (x - xi) * w
        num += div(yi, t)
        den += div(1.0, t)
    return div(num, den)


class LagrangeInterpolant:
    """Interpolating polynomial through a point set, barycentric form."""

    __slots__ = ('_terms',)

    def __init__(self, terms):
        self._terms = tuple(terms)

    @classmethod
    def interpolate(cls, points, strict: bool = False) -> 'LagrangeInterpolant':
        """Build the interpolant through points.

        Args:
            points: Sequence of (x, y) pairs, at least one.
            strict: Reject repeated node x-coordinates instead of
                interpolating them permissively.

        Raises:
            ValueError: points is empty, or strict and a node repeats.
        """
        points = as_points(points)
        if not points:
            raise ValueError("Need at least one point to interpolate")
        if strict:
            check_distinct_nodes(points)
        weights = barycentric_weights(points)
        return cls(BaryTerm(p, w) for p, w in zip(points, weights))

    @property
    def terms(self) -> tuple:
        return self._terms

    @property
    def points(self) -> tuple:
        return tuple(t.point for t in self._terms)

    @property
    def weights(self) -> tuple:
        return tuple(t.w for t in self._terms)

    def evaluate(self, x: float) -> float:
        return barycentric_eval(self._terms, x)

    def evaluate_many(self, xs) -> list:
        return evaluate_many(self, xs)

    def __len__(self):
        return len(self._terms)

    def __repr__(self):
        return f"LagrangeInterpolant({list(self.points)!r})"
