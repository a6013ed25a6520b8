"""Deduction categories subtracted from salary before the income tax schedule.

Each deduction is selected by where the pre-tax salary falls. None of them is
clamped here; the taxable base is floored at zero after all subtractions.
"""

from typing import Dict, List

from .brackets import Band, evaluate_bands

# Earned income deduction
# Format: (salary_threshold, rate, offset) where rate * salary - offset
# equals the published "base + rate of excess" form, e.g.
# band 1: 3,500,000 + 40% of excess over 5M == 0.40 * salary + 1,500,000
INCOME_DEDUCTION_BANDS: List[Band] = [
    (5_000_000, 0.70, 0),
    (15_000_000, 0.40, -1_500_000),
    (45_000_000, 0.15, -5_250_000),
    (100_000_000, 0.05, -9_750_000),
    (float('inf'), 0.02, -12_750_000),
]

# Earned income tax credit
TAX_CREDIT_MAX = 740_000
TAX_CREDIT_MID_FLOOR = 660_000
TAX_CREDIT_MIN = 500_000
TAX_CREDIT_THRESHOLDS = (33_000_000, 70_000_000)
TAX_CREDIT_MID_RATE = 0.008
TAX_CREDIT_HIGH_RATE = 0.5

# Personal (dependent) deduction, per person including self
DEPENDENT_DEDUCTION = 1_500_000


def calc_income_deduction(pre_tax: float) -> float:
    """Earned income deduction from the 5-band schedule."""
    return evaluate_bands(pre_tax, INCOME_DEDUCTION_BANDS)


def calc_tax_credit_deduction(pre_tax: float) -> float:
    """Earned income tax credit.

    Flat 740,000 up to 33M, then phased down toward 660,000 (to 70M) and
    500,000 (above 70M). Salaries under the maximum credit deduct themselves.
    """
    mid, high = TAX_CREDIT_THRESHOLDS
    if pre_tax < TAX_CREDIT_MAX:
        return pre_tax
    elif pre_tax <= mid:
        return TAX_CREDIT_MAX
    elif pre_tax <= high:
        return max(TAX_CREDIT_MID_FLOOR, TAX_CREDIT_MAX - (pre_tax - mid) * TAX_CREDIT_MID_RATE)
    else:
        return max(TAX_CREDIT_MIN, TAX_CREDIT_MID_FLOOR - (pre_tax - high) * TAX_CREDIT_HIGH_RATE)


def calc_family_deduction(pre_tax: float, dependents: int) -> float:
    """Personal deduction: 1.5M per dependent (self included)."""
    if pre_tax < DEPENDENT_DEDUCTION:
        return pre_tax
    return DEPENDENT_DEDUCTION * dependents


def calc_non_tax_deduction(pre_tax: float, non_taxable: float) -> float:
    """Non-taxable allowance, limited to the salary itself."""
    if pre_tax < non_taxable:
        return pre_tax
    return non_taxable


def calc_deductions(pre_tax: float, dependents: int, non_taxable: float) -> Dict[str, float]:
    """Calculate all four deduction categories.

    Returns:
        Dict with income, tax, family, non_tax
    """
    return {
        "income": calc_income_deduction(pre_tax),
        "tax": calc_tax_credit_deduction(pre_tax),
        "family": calc_family_deduction(pre_tax, dependents),
        "non_tax": calc_non_tax_deduction(pre_tax, non_taxable),
    }
