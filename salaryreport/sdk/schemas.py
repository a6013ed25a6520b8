"""Pydantic schemas for salary report inputs and results.

All schemas use extra='forbid' to reject unknown fields, ensuring
typos in profile files cause clear errors rather than silent ignoring.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


DEFAULT_PRE_TAX = 22_000_000
DEFAULT_DEPENDENTS = 1
DEFAULT_NON_TAXABLE = 1_200_000

MONTHS_PER_YEAR = 12


# =============================================================================
# Inputs
# =============================================================================


class InputDefaults(BaseModel):
    """Calculator inputs stored under 'defaults' in profile.yaml.

    Every field is optional; missing values fall back to built-in defaults.
    """

    model_config = ConfigDict(extra="forbid")

    pre_tax: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False, description="Annual pre-tax salary")
    dependents: Optional[int] = Field(default=None, ge=1, description="Dependents, self included")
    non_taxable: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False, description="Annual non-taxable allowance")


# =============================================================================
# Results
# =============================================================================


class InsuranceAmounts(BaseModel):
    """Social insurance withholdings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pension: float = Field(..., description="National pension")
    health: float = Field(..., description="Health insurance")
    care: float = Field(..., description="Long-term-care premium")
    hire: float = Field(..., description="Employment insurance")

    @property
    def total(self) -> float:
        """Total of all insurance premiums."""
        return self.pension + self.health + self.care + self.hire


class DeductionSet(BaseModel):
    """Deduction categories subtracted before the income tax schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    income: float = Field(..., description="Earned income deduction")
    tax: float = Field(..., description="Earned income tax credit")
    family: float = Field(..., description="Personal (dependent) deduction")
    non_tax: float = Field(..., description="Non-taxable allowance deduction")

    @property
    def total(self) -> float:
        """Total of all deductions."""
        return self.income + self.tax + self.family + self.non_tax


class SalaryReport(BaseModel):
    """Full withholding breakdown for one salary.

    Field names serialize to camelCase with ``model_dump(by_alias=True)``
    (``taxOn``, ``afterTax``, ...).
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    pension: float = Field(..., description="National pension")
    health: float = Field(..., description="Health insurance")
    care: float = Field(..., description="Long-term-care premium")
    hire: float = Field(..., description="Employment insurance")
    tax_deduction: float = Field(..., description="Earned income tax credit")
    income_deduction: float = Field(..., description="Earned income deduction")
    family_deduction: float = Field(..., description="Personal (dependent) deduction")
    non_tax_deduction: float = Field(..., description="Non-taxable allowance deduction")
    tax_on: float = Field(..., description="Taxable base the income tax schedule applies to")
    income_tax: float = Field(..., description="National income tax")
    income_tax_local: float = Field(..., description="Local income tax")
    total_tax: float = Field(..., description="Total withholding (insurance + taxes)")
    pre_tax: float = Field(..., description="Pre-tax salary")
    after_tax: float = Field(..., description="Net pay")

    @property
    def insurance(self) -> InsuranceAmounts:
        """Insurance premiums as a group."""
        return InsuranceAmounts(
            pension=self.pension, health=self.health, care=self.care, hire=self.hire,
        )

    @property
    def deductions(self) -> DeductionSet:
        """Deductions as a group."""
        return DeductionSet(
            income=self.income_deduction,
            tax=self.tax_deduction,
            family=self.family_deduction,
            non_tax=self.non_tax_deduction,
        )

    @property
    def effective_rate(self) -> float:
        """Total withholding as a share of pre-tax salary."""
        if not self.pre_tax:
            return 0.0
        return self.total_tax / self.pre_tax

    def monthly(self) -> "SalaryReport":
        """Return the same breakdown divided into monthly amounts."""
        return SalaryReport(**{
            name: value / MONTHS_PER_YEAR for name, value in self.model_dump().items()
        })
