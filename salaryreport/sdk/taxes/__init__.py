"""taxes - Statutory withholding schedules.

Scope:
- Social insurance premiums (pension, health, long-term care, employment)
- Deduction categories (earned income, tax credit, personal, non-taxable)
- Progressive income tax and local income tax

Constraints:
- Pure calculation - no config or file access
- Schedules are module-level constants; only one rate year is supported

Modules:
- brackets: Shared (threshold, rate, offset) band evaluation
- insurance: Insurance premiums from taxable income
- deductions: Four deduction categories from pre-tax salary
- income_tax: Income tax schedule and local surtax

Usage:
    from salaryreport.sdk.taxes import calc_insurance, calc_income_tax

    insurance = calc_insurance(pre_tax=50_000_000, non_taxable=1_200_000)
    tax = calc_income_tax(30_000_000)
"""

from .brackets import (
    Band,
    floor_zero,
    find_band,
    evaluate_band,
    evaluate_bands,
)

from .insurance import (
    PENSION_ANNUAL_CAP,
    taxable_income,
    calc_pension,
    calc_health,
    calc_care,
    calc_hire,
    calc_insurance,
)

from .deductions import (
    INCOME_DEDUCTION_BANDS,
    calc_income_deduction,
    calc_tax_credit_deduction,
    calc_family_deduction,
    calc_non_tax_deduction,
    calc_deductions,
)

from .income_tax import (
    INCOME_TAX_BANDS,
    LOCAL_INCOME_TAX_RATE,
    calc_income_tax,
    calc_local_income_tax,
)

__all__ = [
    # Brackets
    "Band",
    "floor_zero",
    "find_band",
    "evaluate_band",
    "evaluate_bands",
    # Insurance
    "PENSION_ANNUAL_CAP",
    "taxable_income",
    "calc_pension",
    "calc_health",
    "calc_care",
    "calc_hire",
    "calc_insurance",
    # Deductions
    "INCOME_DEDUCTION_BANDS",
    "calc_income_deduction",
    "calc_tax_credit_deduction",
    "calc_family_deduction",
    "calc_non_tax_deduction",
    "calc_deductions",
    # Income tax
    "INCOME_TAX_BANDS",
    "LOCAL_INCOME_TAX_RATE",
    "calc_income_tax",
    "calc_local_income_tax",
]
