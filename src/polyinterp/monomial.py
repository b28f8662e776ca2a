"""Polynomials in monomial (coefficient) form."""

from polyinterp.points import evaluate_many


def monomial_eval(coeffs, x: float) -> float:
    """Evaluate c_0 + c_1*x + ... + c_{n-1}*x^{n-1} by power summation.

    coeffs = [c_0, c_1, ..., c_{n-1}] (lowest degree first).
    The power is carried as a running product, so a huge x overflows to
    inf instead of raising. Empty coeffs evaluate to 0.0.
    """
    result = 0.0
    power = 1.0
    for c in coeffs:
        result += c * power
        power *= x
    return result


class MonomialPolynomial:
    """Ground-truth polynomial held as its coefficient sequence."""

    __slots__ = ('_coeffs',)

    def __init__(self, coeffs):
        self._coeffs = tuple(float(c) for c in coeffs)

    @classmethod
    def new(cls, coeffs) -> 'MonomialPolynomial':
        return cls(coeffs)

    @property
    def coeffs(self) -> tuple:
        return self._coeffs

    @property
    def degree(self) -> int:
        """len(coeffs) - 1; -1 for the empty polynomial."""
        return len(self._coeffs) - 1

    def evaluate(self, x: float) -> float:
        return monomial_eval(self._coeffs, x)

    def evaluate_many(self, xs) -> list:
        return evaluate_many(self, xs)

    def sample(self, xs) -> list:
        """Ground-truth points (x, f(x)) at the given nodes."""
        return self.evaluate_many(xs)

    def __repr__(self):
        return f"MonomialPolynomial({list(self._coeffs)!r})"
