"""Tests for agreement checking and report output."""

import csv
import io
import json
import math
import pytest
from polyinterp.compare import (
    Comparison, ComparisonReport, compare, count_mismatches, max_abs_error,
)
from polyinterp.points import Point


TRUTH = [Point(0.0, 1.0), Point(1.0, 2.0), Point(2.0, 3.0)]
CLOSE = [Point(0.0, 1.001), Point(1.0, 2.0), Point(2.0, 3.5)]


class TestCountMismatches:

    def test_identical(self):
        assert count_mismatches(TRUTH, TRUTH, 0.0) == 0

    def test_threshold_is_strict(self):
        assert count_mismatches(TRUTH, CLOSE, 0.5) == 0
        assert count_mismatches(TRUTH, CLOSE, 0.01) == 1
        assert count_mismatches(TRUTH, CLOSE, 1e-6) == 2

    def test_non_finite_counts(self):
        bad = [Point(0.0, math.nan), Point(1.0, math.inf), Point(2.0, 3.0)]
        assert count_mismatches(TRUTH, bad, 1e9) == 2

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="length"):
            count_mismatches(TRUTH, TRUTH[:2], 0.1)

    def test_misaligned_x(self):
        shifted = [Point(p.x + 1, p.y) for p in TRUTH]
        with pytest.raises(ValueError, match="aligned"):
            count_mismatches(TRUTH, shifted, 0.1)

    def test_empty(self):
        assert count_mismatches([], [], 0.1) == 0


class TestMaxAbsError:

    def test_largest(self):
        assert max_abs_error(TRUTH, CLOSE) == pytest.approx(0.5)

    def test_empty(self):
        assert max_abs_error([], []) == 0.0

    def test_nan(self):
        bad = [Point(0.0, math.nan), Point(1.0, 2.0), Point(2.0, 3.0)]
        assert math.isnan(max_abs_error(TRUTH, bad))


class TestComparisonReport:

    def make_report(self):
        report = ComparisonReport()
        report.add(compare('exact', TRUTH, TRUTH, 0.01))
        report.add(compare('close', TRUTH, CLOSE, 0.01, nodes=3))
        return report

    def test_compare_fields(self):
        c = compare('close', TRUTH, CLOSE, 0.01, nodes=3)
        assert isinstance(c, Comparison)
        assert c.n == 3
        assert c.mismatches == 1
        assert c.max_abs_error == pytest.approx(0.5)
        assert c.extra == {'nodes': 3}

    def test_get(self):
        report = self.make_report()
        assert [c.name for c in report.get('close')] == ['close']
        assert report.get('missing') == []

    def test_to_dict(self):
        rows = self.make_report().to_dict()
        assert rows[0]['name'] == 'exact'
        assert rows[1]['nodes'] == 3
        assert len(self.make_report().to_dict('exact')) == 1

    def test_to_csv(self):
        rows = list(csv.reader(io.StringIO(self.make_report().to_csv())))
        assert rows[0] == ComparisonReport.FIELDS
        assert len(rows) == 3
        assert rows[2][0] == 'close'
        assert rows[2][3] == '1'

    def test_to_json(self):
        data = json.loads(self.make_report().to_json())
        assert [d['mismatches'] for d in data] == [0, 1]

    def test_to_json_non_finite(self):
        report = ComparisonReport()
        bad = [Point(0.0, math.nan), Point(1.0, 2.0), Point(2.0, 3.0)]
        report.add(compare('bad', TRUTH, bad, 0.01))
        data = json.loads(report.to_json())
        assert data[0]['max_abs_error'] is None

    def test_summary(self):
        s = self.make_report().summary()
        assert s['count'] == 2
        assert s['total_points'] == 6
        assert s['total_mismatches'] == 1
        assert s['all_agree'] is False
        assert ComparisonReport().summary() == {}

    def test_write_files(self, tmp_path):
        report = self.make_report()
        csv_path = tmp_path / 'report.csv'
        json_path = tmp_path / 'report.json'
        report.write_csv(str(csv_path))
        report.write_json(str(json_path))
        assert csv_path.read_bytes().decode() == report.to_csv()
        assert json.loads(json_path.read_text())[1]['name'] == 'close'
