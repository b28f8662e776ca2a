"""Reconstruct a known quadratic from three samples and check agreement.

Run with ``python -m polyinterp.demo``. Prints the number of query
points where each interpolant disagrees with the ground truth (expected
0 and 0), then the full comparison report as JSON.
"""

from polyinterp.compare import ComparisonReport, compare
from polyinterp.lagrange import LagrangeInterpolant
from polyinterp.monomial import MonomialPolynomial
from polyinterp.newton import NewtonInterpolant

COEFFS = [1.9, 9.2, 7.0]  # 1.9 + 9.2x + 7.0x^2
NODES = [1.8, 37.2, 80.9]
QUERIES = [float(x) for x in range(10, 100)]

LAGRANGE_TOLERANCE = 0.01
NEWTON_TOLERANCE = 0.05
CROSS_TOLERANCE = 1e-4


def run(coeffs=COEFFS, nodes=NODES, queries=QUERIES,
        lagrange_tolerance: float = LAGRANGE_TOLERANCE,
        newton_tolerance: float = NEWTON_TOLERANCE,
        cross_tolerance: float = CROSS_TOLERANCE) -> ComparisonReport:
    """Sample coeffs at nodes, interpolate, and compare at queries."""
    truth = MonomialPolynomial.new(coeffs)
    points = truth.sample(nodes)
    lagrange = LagrangeInterpolant.interpolate(points)
    newton = NewtonInterpolant.interpolate(points)

    expected = truth.evaluate_many(queries)
    lagrange_ys = lagrange.evaluate_many(queries)
    newton_ys = newton.evaluate_many(queries)

    report = ComparisonReport()
    report.add(compare('lagrange', expected, lagrange_ys, lagrange_tolerance,
                       nodes=len(points)))
    report.add(compare('newton', expected, newton_ys, newton_tolerance,
                       nodes=len(points)))
    report.add(compare('lagrange_vs_newton', lagrange_ys, newton_ys,
                       cross_tolerance, nodes=len(points)))
    return report


def main():
    report = run()
    print(report.get('lagrange')[0].mismatches)
    print(report.get('newton')[0].mismatches)
    print(report.to_json())


if __name__ == "__main__":
    main()
