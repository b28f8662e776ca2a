"""Shared fixtures for polyinterp tests."""

import random
import pytest
from polyinterp.monomial import MonomialPolynomial
from polyinterp.points import random_coefficients, random_nodes


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def quadratic():
    """f(x) = 1.9 + 9.2x + 7.0x^2."""
    return MonomialPolynomial([1.9, 9.2, 7.0])


@pytest.fixture
def quadratic_points(quadratic):
    """The quadratic sampled at three well-separated nodes."""
    return quadratic.sample([1.8, 37.2, 80.9])


@pytest.fixture
def queries():
    return [float(x) for x in range(10, 100)]


@pytest.fixture
def random_cases(rng):
    """(polynomial, points) pairs of degree 0..6 on distinct nodes in [-5, 5]."""
    cases = []
    for degree in range(7):
        poly = MonomialPolynomial(random_coefficients(degree, -3.0, 3.0, rng))
        nodes = random_nodes(degree + 1, -5.0, 5.0, rng)
        cases.append((poly, poly.sample(nodes)))
    return cases
