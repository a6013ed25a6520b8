"""Mandatory social insurance withholdings.

All four premiums are computed from taxable income (pre-tax salary minus the
non-taxable allowance). The long-term-care premium is a share of the health
insurance premium rather than of income.
"""

from typing import Dict

from .brackets import floor_zero

PENSION_RATE = 0.045
PENSION_MONTHLY_CAP = 235_800
PENSION_ANNUAL_CAP = PENSION_MONTHLY_CAP * 12  # 2,829,600

HEALTH_RATE = 0.03495
CARE_RATE = 0.1227  # of the health insurance premium
HIRE_RATE = 0.008


def taxable_income(pre_tax: float, non_taxable: float) -> float:
    """Salary subject to insurance premiums (may be negative, callers clamp)."""
    return pre_tax - non_taxable


def calc_pension(income: float) -> float:
    """National pension: 4.5% of taxable income, capped annually."""
    pension = floor_zero(income * PENSION_RATE)
    if pension > PENSION_ANNUAL_CAP:
        pension = PENSION_ANNUAL_CAP
    return pension


def calc_health(income: float) -> float:
    """Health insurance: 3.495% of taxable income."""
    return floor_zero(income * HEALTH_RATE)


def calc_care(health: float) -> float:
    """Long-term-care premium: 12.27% of the health insurance premium."""
    return floor_zero(health * CARE_RATE)


def calc_hire(income: float) -> float:
    """Unemployment (employment) insurance: 0.8% of taxable income."""
    return floor_zero(income * HIRE_RATE)


def calc_insurance(pre_tax: float, non_taxable: float) -> Dict[str, float]:
    """Calculate all four insurance withholdings.

    Args:
        pre_tax: Annual pre-tax salary
        non_taxable: Annual non-taxable allowance

    Returns:
        Dict with pension, health, care, hire
    """
    income = taxable_income(pre_tax, non_taxable)
    health = calc_health(income)

    return {
        "pension": calc_pension(income),
        "health": health,
        "care": calc_care(health),
        "hire": calc_hire(income),
    }
