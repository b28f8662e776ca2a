"""Agreement checks between polynomial representations, with CSV/JSON output."""

import csv
import io
import json
import math
from dataclasses import dataclass, field


@dataclass
class Comparison:
    name: str
    tolerance: float
    n: int  # number of query points
    mismatches: int = 0
    max_abs_error: float = 0.0
    extra: dict = field(default_factory=dict)


def _paired_errors(truth, approx) -> list:
    if len(truth) != len(approx):
        raise ValueError(
            f"Point sequences differ in length: {len(truth)} vs {len(approx)}")
    errors = []
    for (xt, yt), (xa, ya) in zip(truth, approx):
        if xt != xa:
            raise ValueError(f"Points are not aligned: x={xt} vs x={xa}")
        errors.append(abs(yt - ya))
    return errors


def count_mismatches(truth, approx, tolerance: float) -> int:
    """Count query points where |y_truth - y_approx| > tolerance.

    truth and approx are parallel (x, y) sequences over the same x values,
    as produced by evaluate_many. A non-finite error counts as a mismatch.
    """
    return sum(1 for e in _paired_errors(truth, approx)
               if not math.isfinite(e) or e > tolerance)


def max_abs_error(truth, approx) -> float:
    """Largest |y_truth - y_approx|; nan if any error is nan, 0.0 if empty."""
    errors = _paired_errors(truth, approx)
    if any(math.isnan(e) for e in errors):
        return math.nan
    return max(errors, default=0.0)


def compare(name: str, truth, approx, tolerance: float, **extra) -> Comparison:
    """Compare two parallel point sequences and record the outcome."""
    return Comparison(
        name=name, tolerance=tolerance, n=len(truth),
        mismatches=count_mismatches(truth, approx, tolerance),
        max_abs_error=max_abs_error(truth, approx),
        extra=extra,
    )


class ComparisonReport:
    """Collects comparisons and renders them as CSV or JSON."""

    FIELDS = ['name', 'tolerance', 'n', 'mismatches', 'max_abs_error']

    def __init__(self):
        self.comparisons: list[Comparison] = []

    def add(self, comparison: Comparison) -> Comparison:
        self.comparisons.append(comparison)
        return comparison

    def get(self, name: str) -> list[Comparison]:
        """Get all comparisons with given name."""
        return [c for c in self.comparisons if c.name == name]

    def _select(self, name):
        return self.get(name) if name else self.comparisons

    def to_dict(self, name: str = None) -> list:
        return [
            {
                'name': c.name, 'tolerance': c.tolerance, 'n': c.n,
                'mismatches': c.mismatches, 'max_abs_error': c.max_abs_error,
                **c.extra,
            }
            for c in self._select(name)
        ]

    def to_csv(self, name: str = None) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(self.FIELDS)
        for c in self._select(name):
            writer.writerow([c.name, c.tolerance, c.n, c.mismatches, c.max_abs_error])
        return output.getvalue()

    def to_json(self, name: str = None) -> str:
        # nan/inf errors serialize as null rather than invalid JSON
        data = self.to_dict(name)
        for entry in data:
            if not math.isfinite(entry['max_abs_error']):
                entry['max_abs_error'] = None
        return json.dumps(data, indent=2)

    def summary(self) -> dict:
        """Totals across every recorded comparison."""
        if not self.comparisons:
            return {}
        return {
            'count': len(self.comparisons),
            'total_points': sum(c.n for c in self.comparisons),
            'total_mismatches': sum(c.mismatches for c in self.comparisons),
            'all_agree': all(c.mismatches == 0 for c in self.comparisons),
            'names': [c.name for c in self.comparisons],
        }

    def write_csv(self, filepath: str, name: str = None):
        with open(filepath, 'w', newline='') as f:
            f.write(self.to_csv(name))

    def write_json(self, filepath: str, name: str = None):
        with open(filepath, 'w') as f:
            f.write(self.to_json(name))
