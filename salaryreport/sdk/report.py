"""Salary report assembly.

Sequences the statutory schedules in data-dependency order:

1. Insurance premiums from taxable income (pre-tax - non-taxable)
2. Deductions from pre-tax salary, dependents, allowance
3. Taxable base = pre-tax - insurance - deductions (floored at zero)
4. Income tax on the taxable base
5. Local income tax (10% of income tax)
6. Total withholding and net pay
"""

import csv
import io
import logging
import math
from typing import Dict, List

from .schemas import (
    DEFAULT_DEPENDENTS,
    DEFAULT_NON_TAXABLE,
    DEFAULT_PRE_TAX,
    SalaryReport,
)
from .taxes import (
    calc_deductions,
    calc_income_tax,
    calc_insurance,
    calc_local_income_tax,
    floor_zero,
)

logger = logging.getLogger(__name__)

# Upper bound on rows produced by salary_table
MAX_TABLE_ROWS = 1000


def compute_salary_report(
    pre_tax: float = DEFAULT_PRE_TAX,
    dependents: int = DEFAULT_DEPENDENTS,
    non_taxable: float = DEFAULT_NON_TAXABLE,
) -> SalaryReport:
    """Compute the full annual withholding breakdown for a salary.

    Args:
        pre_tax: Contracted annual salary before any withholding
        dependents: Number of dependents, self included
        non_taxable: Annual non-taxable allowance (e.g. meal allowance)

    Returns:
        SalaryReport with insurance, deductions, taxes and net pay
    """
    insurance = calc_insurance(pre_tax, non_taxable)
    pension = insurance["pension"]
    health = insurance["health"]
    care = insurance["care"]
    hire = insurance["hire"]

    deductions = calc_deductions(pre_tax, dependents, non_taxable)

    tax_on = floor_zero(
        pre_tax - pension - health - care - hire
        - deductions["income"] - deductions["tax"] - deductions["family"] - deductions["non_tax"]
    )

    income_tax = calc_income_tax(tax_on)
    income_tax_local = calc_local_income_tax(income_tax)

    total_tax = pension + health + care + hire + income_tax + income_tax_local
    after_tax = pre_tax - total_tax

    logger.debug(
        f"pre_tax={pre_tax:,.0f} dependents={dependents} non_taxable={non_taxable:,.0f}: "
        f"tax_on={tax_on:,.2f} total_tax={total_tax:,.2f}"
    )

    return SalaryReport(
        pension=pension,
        health=health,
        care=care,
        hire=hire,
        tax_deduction=deductions["tax"],
        income_deduction=deductions["income"],
        family_deduction=deductions["family"],
        non_tax_deduction=deductions["non_tax"],
        tax_on=tax_on,
        income_tax=income_tax,
        income_tax_local=income_tax_local,
        total_tax=total_tax,
        pre_tax=pre_tax,
        after_tax=after_tax,
    )


def salary_table(
    start: float,
    stop: float,
    step: float,
    dependents: int = DEFAULT_DEPENDENTS,
    non_taxable: float = DEFAULT_NON_TAXABLE,
) -> List[SalaryReport]:
    """Compute reports for a range of salaries (take-home table).

    Salaries run from start to stop inclusive in increments of step.
    A stop that falls on a step within float tolerance is included.

    Raises:
        ValueError: If an amount is not finite, step is not positive,
            stop is below start, or the range exceeds MAX_TABLE_ROWS rows
    """
    if not all(math.isfinite(v) for v in (start, stop, step)):
        raise ValueError(f"start, stop and step must be finite, got {start}, {stop}, {step}")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if stop < start:
        raise ValueError(f"stop ({stop}) must not be below start ({start})")

    steps = (stop - start) / step
    if steps < MAX_TABLE_ROWS:
        whole = round(steps)
        if math.isclose(steps, whole, rel_tol=1e-9, abs_tol=1e-9):
            count = whole + 1
        else:
            count = math.floor(steps) + 1
    if steps >= MAX_TABLE_ROWS or count > MAX_TABLE_ROWS:
        raise ValueError(
            f"range from {start} to {stop} by {step} is more than the limit of "
            f"{MAX_TABLE_ROWS} rows; use a larger step"
        )

    logger.debug(f"salary table: {count} rows from {start} to {stop}")
    return [
        compute_salary_report(min(start + i * step, stop), dependents, non_taxable)
        for i in range(count)
    ]


def compare_reports(base: SalaryReport, other: SalaryReport) -> Dict[str, float]:
    """Field-wise difference (other - base) between two reports."""
    base_values = base.model_dump()
    other_values = other.model_dump()
    return {name: other_values[name] - base_values[name] for name in base_values}


def reports_to_csv(reports: List[SalaryReport]) -> str:
    """Render reports as CSV text, one row per report, snake_case header."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(list(SalaryReport.model_fields))
    for report in reports:
        writer.writerow([round(value, 2) for value in report.model_dump().values()])
    return output.getvalue()
