"""Progressive income tax and local income tax.

The schedule is applied to the taxable base (salary after insurance and all
deductions), not to the pre-tax salary.
"""

from typing import List

from .brackets import Band, evaluate_bands

# Progressive income tax schedule
# Format: (taxable_base_threshold, marginal_rate, progressive_offset)
INCOME_TAX_BANDS: List[Band] = [
    (12_000_000, 0.06, 0),
    (46_000_000, 0.15, 1_080_000),
    (88_000_000, 0.24, 5_220_000),
    (150_000_000, 0.35, 14_900_000),
    (300_000_000, 0.38, 19_400_000),
    (500_000_000, 0.40, 25_400_000),
    (1_000_000_000, 0.42, 35_400_000),
    (float('inf'), 0.45, 65_400_000),
]

LOCAL_INCOME_TAX_RATE = 0.1


def calc_income_tax(taxable_base: float) -> float:
    """Calculate national income tax on the taxable base.

    No clamp is applied; offsets keep the formula continuous at every
    threshold so a non-negative base never yields negative tax.
    """
    return evaluate_bands(taxable_base, INCOME_TAX_BANDS)


def calc_local_income_tax(income_tax: float) -> float:
    """Local income tax is a flat surtax on national income tax."""
    return income_tax * LOCAL_INCOME_TAX_RATE
