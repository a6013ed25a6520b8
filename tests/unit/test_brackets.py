"""Unit tests for bracket table evaluation and the income tax schedule."""

import pytest

from salaryreport.sdk.taxes import (
    INCOME_DEDUCTION_BANDS,
    INCOME_TAX_BANDS,
    calc_income_tax,
    calc_local_income_tax,
    evaluate_band,
    evaluate_bands,
    find_band,
    floor_zero,
)


class TestFloorZero:
    """Tests for the zero clamp."""

    def test_negative_becomes_zero(self):
        assert floor_zero(-0.01) == 0
        assert floor_zero(-1_000_000) == 0

    def test_positive_unchanged(self):
        assert floor_zero(123.45) == 123.45

    def test_zero_unchanged(self):
        assert floor_zero(0) == 0


class TestFindBand:
    """Tests for band selection."""

    def test_threshold_is_inclusive(self):
        """An amount equal to a threshold belongs to the lower band."""
        assert find_band(12_000_000, INCOME_TAX_BANDS) == 0
        assert find_band(46_000_000, INCOME_TAX_BANDS) == 1

    def test_above_threshold_moves_up(self):
        assert find_band(12_000_001, INCOME_TAX_BANDS) == 1

    def test_zero_is_first_band(self):
        assert find_band(0, INCOME_TAX_BANDS) == 0
        assert find_band(0, INCOME_DEDUCTION_BANDS) == 0

    def test_last_band_is_unbounded(self):
        assert find_band(10_000_000_000, INCOME_TAX_BANDS) == len(INCOME_TAX_BANDS) - 1
        assert find_band(10_000_000_000, INCOME_DEDUCTION_BANDS) == len(INCOME_DEDUCTION_BANDS) - 1

    def test_table_shapes(self):
        """Income tax has 7 thresholds (8 bands), income deduction 4 (5 bands)."""
        assert len(INCOME_TAX_BANDS) == 8
        assert len(INCOME_DEDUCTION_BANDS) == 5
        assert INCOME_TAX_BANDS[-1][0] == float("inf")
        assert INCOME_DEDUCTION_BANDS[-1][0] == float("inf")

    def test_thresholds_ascending(self):
        for bands in (INCOME_TAX_BANDS, INCOME_DEDUCTION_BANDS):
            thresholds = [b[0] for b in bands]
            assert thresholds == sorted(thresholds)


class TestContinuity:
    """Adjacent band formulas agree at each finite threshold."""

    @pytest.mark.parametrize("index", range(len(INCOME_TAX_BANDS) - 1))
    def test_income_tax_continuous(self, index):
        threshold = INCOME_TAX_BANDS[index][0]
        lower = evaluate_band(threshold, INCOME_TAX_BANDS[index])
        upper = evaluate_band(threshold, INCOME_TAX_BANDS[index + 1])
        assert lower == pytest.approx(upper, abs=1e-6)

    @pytest.mark.parametrize("index", range(len(INCOME_DEDUCTION_BANDS) - 1))
    def test_income_deduction_continuous(self, index):
        threshold = INCOME_DEDUCTION_BANDS[index][0]
        lower = evaluate_band(threshold, INCOME_DEDUCTION_BANDS[index])
        upper = evaluate_band(threshold, INCOME_DEDUCTION_BANDS[index + 1])
        assert lower == pytest.approx(upper, abs=1e-6)


class TestIncomeTax:
    """Tests for the progressive income tax schedule."""

    def test_zero_base(self):
        assert calc_income_tax(0) == 0

    def test_first_band_flat_rate(self):
        assert calc_income_tax(10_000_000) == pytest.approx(600_000)

    def test_first_boundary(self):
        """At 12M both 6% and 15% - 1.08M give 720,000."""
        assert calc_income_tax(12_000_000) == pytest.approx(720_000)

    def test_second_band(self):
        # 30M * 15% - 1.08M
        assert calc_income_tax(30_000_000) == pytest.approx(3_420_000)

    def test_fourth_band(self):
        # 100M * 35% - 14.9M
        assert calc_income_tax(100_000_000) == pytest.approx(20_100_000)

    def test_top_band(self):
        # 1.2B * 45% - 65.4M
        assert calc_income_tax(1_200_000_000) == pytest.approx(474_600_000)

    def test_monotonic(self):
        bases = [0, 5e6, 12e6, 20e6, 46e6, 60e6, 88e6, 120e6, 150e6, 200e6, 300e6, 400e6, 500e6, 800e6, 1e9, 2e9]
        taxes = [calc_income_tax(b) for b in bases]
        assert taxes == sorted(taxes)

    def test_evaluate_bands_matches_calc(self):
        assert evaluate_bands(55_000_000, INCOME_TAX_BANDS) == calc_income_tax(55_000_000)


class TestLocalIncomeTax:
    """Local income tax is 10% of income tax."""

    def test_ten_percent(self):
        assert calc_local_income_tax(485_486.52048) == pytest.approx(48_548.652048)

    def test_zero(self):
        assert calc_local_income_tax(0) == 0
