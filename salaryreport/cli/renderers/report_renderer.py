"""Rich renderer for salary reports.

Transforms SDK SalaryReport results into formatted Rich tables.
"""

from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from salaryreport.sdk import SalaryReport


INSURANCE_ROWS = [
    ("pension", "National Pension"),
    ("health", "Health Insurance"),
    ("care", "Long-Term Care"),
    ("hire", "Employment Insurance"),
]

DEDUCTION_ROWS = [
    ("income_deduction", "Earned Income Deduction"),
    ("tax_deduction", "Earned Income Tax Credit"),
    ("family_deduction", "Personal Deduction"),
    ("non_tax_deduction", "Non-Taxable Allowance"),
]

TAX_ROWS = [
    ("income_tax", "Income Tax"),
    ("income_tax_local", "Local Income Tax"),
]

# Columns shown in the salary table view
TABLE_COLUMNS = [
    ("pre_tax", "Pre-Tax"),
    ("pension", "Pension"),
    ("health", "Health"),
    ("care", "Care"),
    ("hire", "Employment"),
    ("income_tax", "Income Tax"),
    ("income_tax_local", "Local Tax"),
    ("total_tax", "Withholding"),
    ("after_tax", "Net Pay"),
]

INPUT_LABELS = {
    "pre_tax": "Pre-Tax Salary",
    "dependents": "Dependents",
    "non_taxable": "Non-Taxable Allowance",
}


def render_report(
    console: Console,
    report: SalaryReport,
    inputs: Optional[dict] = None,
    sources: Optional[dict] = None,
    monthly: bool = False,
) -> None:
    """Render a single salary report.

    Args:
        console: Rich Console instance
        report: Annual or monthly SalaryReport
        inputs: Resolved inputs (from resolve_inputs)
        sources: Per-input source metadata (from resolve_inputs)
        monthly: Whether report holds monthly amounts (affects title)
    """
    if inputs:
        _render_sources(console, inputs, sources or {})

    period = "Monthly" if monthly else "Annual"
    table = Table(
        title=f"{period} Salary Report: {_fmt(report.pre_tax)}",
        box=box.ROUNDED,
    )
    table.add_column("", style="bold", min_width=28)
    table.add_column("Amount", justify="right", min_width=14)

    values = report.model_dump()

    table.add_row("[bold]INSURANCE[/bold]", "")
    for key, label in INSURANCE_ROWS:
        table.add_row(f"  {label}", _fmt(values[key]))
    table.add_row("", "")

    table.add_row("[bold]DEDUCTIONS[/bold]", "")
    for key, label in DEDUCTION_ROWS:
        table.add_row(f"  {label}", _fmt(values[key]))
    table.add_row("", "")

    table.add_row("Taxable Base", _fmt(report.tax_on), style="dim")
    table.add_row("", "")

    table.add_row("[bold]TAXES[/bold]", "")
    for key, label in TAX_ROWS:
        table.add_row(f"  {label}", _fmt(values[key]))
    table.add_row("", "")

    table.add_row("[bold]Total Withholding[/bold]", f"[red]{_fmt(report.total_tax)}[/red]")
    table.add_row("[bold]Net Pay[/bold]", f"[green]{_fmt(report.after_tax)}[/green]")
    table.add_row("Effective Rate", f"{report.effective_rate * 100:.2f}%", style="dim")

    console.print(table)


def render_salary_table(console: Console, reports: List[SalaryReport], monthly: bool = False) -> None:
    """Render a take-home table, one row per salary."""
    period = "Monthly" if monthly else "Annual"
    table = Table(title=f"{period} Take-Home Table", box=box.ROUNDED)
    for _key, label in TABLE_COLUMNS:
        table.add_column(label, justify="right")

    for report in reports:
        values = report.model_dump()
        table.add_row(*[_fmt(values[key]) for key, _label in TABLE_COLUMNS])

    console.print(table)


def render_comparison(
    console: Console,
    base: SalaryReport,
    other: SalaryReport,
    deltas: Dict[str, float],
    base_label: str = "Base",
    other_label: str = "Scenario",
) -> None:
    """Render two reports side by side with field deltas."""
    table = Table(title="Salary Report Comparison", box=box.ROUNDED)
    table.add_column("", style="bold", min_width=28)
    table.add_column(base_label, justify="right", min_width=14)
    table.add_column(other_label, justify="right", min_width=14)
    table.add_column("Change", justify="right", min_width=14)

    base_values = base.model_dump()
    other_values = other.model_dump()
    rows = (
        [("pre_tax", "Pre-Tax Salary")]
        + INSURANCE_ROWS
        + DEDUCTION_ROWS
        + [("tax_on", "Taxable Base")]
        + TAX_ROWS
        + [("total_tax", "Total Withholding"), ("after_tax", "Net Pay")]
    )
    for key, label in rows:
        table.add_row(label, _fmt(base_values[key]), _fmt(other_values[key]), _fmt_delta(deltas[key]))

    console.print(table)


def _render_sources(console: Console, inputs: dict, sources: dict) -> None:
    """Render inputs panel with where each value came from."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value", justify="right")
    table.add_column("source")

    for key, label in INPUT_LABELS.items():
        if key not in inputs:
            continue
        value = inputs[key]
        shown = str(value) if key == "dependents" else _fmt(value)
        table.add_row(label, shown, _format_source(sources.get(key, {})))

    console.print(Panel(table, title="Inputs", border_style="dim"))


def _format_source(info: dict) -> str:
    """Format source info with color coding."""
    source_type = info.get("type", "unknown")

    if source_type == "override":
        return "[magenta]command line[/magenta]"
    elif source_type == "registered":
        return "[cyan]profile[/cyan]"
    elif source_type == "default":
        return "[dim]default[/dim]"
    else:
        return info.get("note", "")


def _fmt(value: float) -> str:
    """Format an amount with thousands separators, no decimals."""
    return f"{value:,.0f}"


def _fmt_delta(value: float) -> str:
    """Format a signed change, colored by direction."""
    if round(value) == 0:
        return "[dim]0[/dim]"
    color = "green" if value > 0 else "red"
    return f"[{color}]{value:+,.0f}[/{color}]"
