"""Tests for the MCP server tools.

Tool functions are called directly; FastMCP registration leaves them
as plain coroutines.
"""

import asyncio

import pytest

pytest.importorskip("mcp.server.fastmcp")

from mcp.server.fastmcp.exceptions import ToolError

from salaryreport.mcp.server import mcp, salary_report, salary_table


def test_salary_report_defaults():
    result = asyncio.run(salary_report(
        pre_tax=22_000_000, dependents=1, non_taxable=1_200_000, monthly=False,
    ))

    assert result["period"] == "annual"
    assert result["report"]["pension"] == pytest.approx(936_000)
    assert result["report"]["after_tax"] == pytest.approx(19_547_406.835472)
    assert result["effective_rate"] == pytest.approx(0.1115, abs=1e-4)


def test_salary_report_monthly():
    result = asyncio.run(salary_report(
        pre_tax=100_000_000, dependents=2, non_taxable=1_200_000, monthly=True,
    ))

    assert result["period"] == "monthly"
    assert result["report"]["pension"] == pytest.approx(235_800)


def test_salary_table_rows():
    result = asyncio.run(salary_table(
        start=20_000_000, stop=40_000_000, step=10_000_000,
        dependents=1, non_taxable=1_200_000, monthly=False,
    ))

    assert result["count"] == 3
    assert [row["pre_tax"] for row in result["rows"]] == [20_000_000, 30_000_000, 40_000_000]


def test_salary_table_error():
    result = asyncio.run(salary_table(
        start=20_000_000, stop=10_000_000, step=1_000_000,
        dependents=1, non_taxable=1_200_000, monthly=False,
    ))

    assert "must not be below start" in result["error"]
    assert result["rows"] == []


def test_salary_table_row_limit():
    result = asyncio.run(salary_table(
        start=0, stop=1_000_000_000_000, step=1,
        dependents=1, non_taxable=1_200_000, monthly=False,
    ))

    assert "more than the limit" in result["error"]
    assert result["count"] == 0


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_non_finite_salary_rejected(value):
    with pytest.raises(ToolError, match="finite number"):
        asyncio.run(mcp.call_tool("salary_report", {"pre_tax": value}))
