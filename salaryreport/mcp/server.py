"""Salary Report MCP Server - FastMCP implementation for salary calculation tools."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from salaryreport.sdk import compute_salary_report, salary_table as sdk_salary_table

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("salary-report")


# --- Tools ---

@mcp.tool()
async def salary_report(
    pre_tax: float = Field(default=22_000_000, ge=0, allow_inf_nan=False, description="Annual pre-tax salary"),
    dependents: int = Field(default=1, ge=1, description="Number of dependents, self included"),
    non_taxable: float = Field(default=1_200_000, ge=0, allow_inf_nan=False, description="Annual non-taxable allowance"),
    monthly: bool = Field(default=False, description="Return monthly amounts (annual / 12)"),
) -> dict[str, Any]:
    """Compute the salary withholding breakdown: insurance, deductions, taxable base, income tax, local tax, total withholding and net pay."""
    try:
        report = compute_salary_report(pre_tax, dependents, non_taxable)
        if monthly:
            report = report.monthly()

        return {
            "inputs": {"pre_tax": pre_tax, "dependents": dependents, "non_taxable": non_taxable},
            "period": "monthly" if monthly else "annual",
            "report": report.model_dump(),
            "effective_rate": round(report.effective_rate, 4),
        }

    except Exception as e:
        logger.error(f"Error computing salary report: {e}")
        return {"error": str(e)}


@mcp.tool()
async def salary_table(
    start: float = Field(allow_inf_nan=False, description="First salary in the table"),
    stop: float = Field(allow_inf_nan=False, description="Last salary in the table (inclusive)"),
    step: float = Field(allow_inf_nan=False, description="Salary increment (must be positive)"),
    dependents: int = Field(default=1, ge=1, description="Number of dependents, self included"),
    non_taxable: float = Field(default=1_200_000, ge=0, allow_inf_nan=False, description="Annual non-taxable allowance"),
    monthly: bool = Field(default=False, description="Return monthly amounts (annual / 12)"),
) -> dict[str, Any]:
    """Compute take-home figures for a range of salaries. Returns one row per salary with withholding and net pay."""
    try:
        reports = sdk_salary_table(start, stop, step, dependents, non_taxable)
        if monthly:
            reports = [r.monthly() for r in reports]

        rows = [
            {
                "pre_tax": r.pre_tax,
                "total_tax": r.total_tax,
                "after_tax": r.after_tax,
                "effective_rate": round(r.effective_rate, 4),
            }
            for r in reports
        ]
        return {
            "rows": rows,
            "count": len(rows),
            "period": "monthly" if monthly else "annual",
        }

    except Exception as e:
        logger.error(f"Error computing salary table: {e}")
        return {"error": str(e), "rows": [], "count": 0}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
