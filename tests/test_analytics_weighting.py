"""Tests for fitwhoop.analytics.weighting -- renormalized composites."""

import pytest

from fitwhoop.analytics.weighting import WeightedComponent, weighted_score


class TestWeightedComponent:
    def test_positive_raw_is_present(self):
        c = WeightedComponent.from_raw("hrv", 0.4, 55.0, 68.75)
        assert c.present
        assert c.value == 68.75

    def test_none_raw_is_absent(self):
        c = WeightedComponent.from_raw("hrv", 0.4, None, 50.0)
        assert not c.present
        assert c.value == 0.0

    def test_zero_raw_is_absent(self):
        assert not WeightedComponent.from_raw("rhr", 0.2, 0.0, 100.0).present

    def test_negative_raw_is_absent(self):
        assert not WeightedComponent.from_raw("rhr", 0.2, -1.0, 100.0).present


class TestWeightedScore:
    def test_nothing_present(self):
        comps = [
            WeightedComponent("a", 0.5, 80.0, False),
            WeightedComponent("b", 0.5, 60.0, False),
        ]
        assert weighted_score(comps) is None

    def test_empty(self):
        assert weighted_score([]) is None

    def test_single_component_collapses_divisor(self):
        comps = [
            WeightedComponent("sleep", 0.4, 88.0, True),
            WeightedComponent("hrv", 0.4, 0.0, False),
            WeightedComponent("rhr", 0.2, 0.0, False),
        ]
        assert weighted_score(comps) == pytest.approx(88.0)

    def test_renormalizes_over_present(self):
        comps = [
            WeightedComponent("sleep", 0.4, 88.0, True),
            WeightedComponent("hrv", 0.4, 10.0, False),
            WeightedComponent("rhr", 0.2, 100.0, True),
        ]
        # (0.4*88 + 0.2*100) / 0.6
        assert weighted_score(comps) == pytest.approx(92.0)

    def test_all_present(self):
        comps = [
            WeightedComponent("sleep", 0.4, 88.0, True),
            WeightedComponent("hrv", 0.4, 100.0, True),
            WeightedComponent("rhr", 0.2, 100.0, True),
        ]
        assert weighted_score(comps) == pytest.approx(95.2)

    def test_absent_value_ignored_even_if_nonzero(self):
        comps = [
            WeightedComponent("a", 1.0, 50.0, True),
            WeightedComponent("b", 1.0, 999.0, False),
        ]
        assert weighted_score(comps) == pytest.approx(50.0)
