"""Salary Report CLI - Command-line interface for salary withholding breakdowns."""

import json
import logging
import math
import os

import click
from rich.console import Console

from salaryreport import __version__
from salaryreport.sdk import (
    OUTPUT_FORMATS,
    ProfileNotFoundError,
    ProfileValidationError,
    SettingsError,
    compare_reports,
    compute_salary_report,
    get_output_format,
    reports_to_csv,
    resolve_inputs,
    salary_table,
)

from .profile_commands import profile as profile_group
from .settings_commands import settings as settings_group
from .renderers.report_renderer import render_comparison, render_report, render_salary_table

# compare has no tabular form
COMPARE_FORMATS = ("text", "json")


class FiniteFloat(click.FloatRange):
    """FloatRange that also rejects nan and inf."""

    name = "amount"

    def convert(self, value, param, ctx):
        rv = super().convert(value, param, ctx)
        if not math.isfinite(rv):
            self.fail(f"{value!r} is not a finite number.", param, ctx)
        return rv


AMOUNT = FiniteFloat(min=0)
FINITE_FLOAT = FiniteFloat()


def _configure_logging() -> None:
    """Configure logging based on LOG_LEVEL environment variable."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def _resolve_format(output_format):
    """Use --format if given, else the settings.json preference."""
    if output_format:
        return output_format
    try:
        return get_output_format()
    except SettingsError as e:
        raise click.ClickException(str(e))


def _resolve(pre_tax, dependents, non_taxable) -> dict:
    """Resolve inputs from command line, profile, and built-in defaults."""
    try:
        return resolve_inputs(pre_tax=pre_tax, dependents=dependents, non_taxable=non_taxable)
    except (ProfileNotFoundError, ProfileValidationError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="salary-report")
def cli():
    """Salary Report - Annual salary withholding breakdown.

    Computes insurance premiums, deductions, income tax, local income
    tax and net pay from a pre-tax annual salary.

    Inputs not given on the command line are taken from (in order):

    \b
    1. profile.yaml 'defaults' section
    2. Built-in defaults (22,000,000 salary, 1 dependent, 1,200,000 non-taxable)

    Run 'salary-report profile show' to see the active profile.
    """
    _configure_logging()


cli.add_command(profile_group)
cli.add_command(settings_group)


@cli.command("calc")
@click.option("--salary", "pre_tax", type=AMOUNT, help="Annual pre-tax salary")
@click.option("--dependents", type=click.IntRange(min=1), help="Dependents, self included")
@click.option("--non-taxable", type=AMOUNT, help="Annual non-taxable allowance")
@click.option("--monthly", is_flag=True, help="Show monthly amounts (annual / 12)")
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
              help="Output format (default: settings.json preference, else text)")
def calc(pre_tax, dependents, non_taxable, monthly, output_format):
    """Calculate the withholding breakdown for one salary.

    Examples:

    \b
      salary-report calc
      salary-report calc --salary 50000000 --dependents 3
      salary-report calc --salary 50000000 --monthly --format json
    """
    output_format = _resolve_format(output_format)
    resolved = _resolve(pre_tax, dependents, non_taxable)
    inputs = resolved["inputs"]

    report = compute_salary_report(**inputs)
    if monthly:
        report = report.monthly()

    if output_format == "json":
        output = {
            "inputs": inputs,
            "period": "monthly" if monthly else "annual",
            "report": report.model_dump(),
        }
        click.echo(json.dumps(output, indent=2))
    elif output_format == "csv":
        click.echo(reports_to_csv([report]), nl=False)
    else:
        render_report(Console(), report, inputs=inputs, sources=resolved["sources"], monthly=monthly)


@cli.command("table")
@click.option("--start", type=AMOUNT, default=20_000_000, show_default=True,
              help="First salary in the table")
@click.option("--stop", type=AMOUNT, default=100_000_000, show_default=True,
              help="Last salary in the table (inclusive)")
@click.option("--step", type=FINITE_FLOAT, default=10_000_000, show_default=True, help="Salary increment")
@click.option("--dependents", type=click.IntRange(min=1), help="Dependents, self included")
@click.option("--non-taxable", type=AMOUNT, help="Annual non-taxable allowance")
@click.option("--monthly", is_flag=True, help="Show monthly amounts (annual / 12)")
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
              help="Output format (default: settings.json preference, else text)")
def table(start, stop, step, dependents, non_taxable, monthly, output_format):
    """Print a take-home table over a range of salaries.

    Examples:

    \b
      salary-report table
      salary-report table --start 30000000 --stop 60000000 --step 5000000 --monthly
      salary-report table --format csv > take_home.csv
    """
    output_format = _resolve_format(output_format)
    inputs = _resolve(None, dependents, non_taxable)["inputs"]

    try:
        reports = salary_table(start, stop, step, inputs["dependents"], inputs["non_taxable"])
    except ValueError as e:
        raise click.BadParameter(str(e))

    if monthly:
        reports = [r.monthly() for r in reports]

    if output_format == "json":
        output = {
            "dependents": inputs["dependents"],
            "non_taxable": inputs["non_taxable"],
            "period": "monthly" if monthly else "annual",
            "reports": [r.model_dump() for r in reports],
        }
        click.echo(json.dumps(output, indent=2))
    elif output_format == "csv":
        click.echo(reports_to_csv(reports), nl=False)
    else:
        render_salary_table(Console(width=140), reports, monthly=monthly)


@cli.command("compare")
@click.option("--salary", "pre_tax", type=AMOUNT, help="Base annual pre-tax salary")
@click.option("--dependents", type=click.IntRange(min=1), help="Base dependents")
@click.option("--non-taxable", type=AMOUNT, help="Base non-taxable allowance")
@click.option("--vs-salary", type=AMOUNT, help="Scenario salary (default: base)")
@click.option("--vs-dependents", type=click.IntRange(min=1), help="Scenario dependents (default: base)")
@click.option("--vs-non-taxable", type=AMOUNT, help="Scenario allowance (default: base)")
@click.option("--monthly", is_flag=True, help="Compare monthly amounts (annual / 12)")
@click.option("--format", "output_format", type=click.Choice(COMPARE_FORMATS), default=None,
              help="Output format (default: settings.json preference, else text)")
def compare(pre_tax, dependents, non_taxable, vs_salary, vs_dependents, vs_non_taxable, monthly, output_format):
    """Compare a base salary report against a changed scenario.

    Scenario values default to the base values, so only the inputs
    being changed need to be given.

    Examples:

    \b
      salary-report compare --dependents 1 --vs-dependents 3
      salary-report compare --salary 40000000 --vs-salary 45000000 --monthly
    """
    output_format = _resolve_format(output_format)
    if output_format not in COMPARE_FORMATS:
        output_format = "text"

    base_inputs = _resolve(pre_tax, dependents, non_taxable)["inputs"]
    other_inputs = {
        "pre_tax": base_inputs["pre_tax"] if vs_salary is None else vs_salary,
        "dependents": base_inputs["dependents"] if vs_dependents is None else vs_dependents,
        "non_taxable": base_inputs["non_taxable"] if vs_non_taxable is None else vs_non_taxable,
    }

    base = compute_salary_report(**base_inputs)
    other = compute_salary_report(**other_inputs)
    if monthly:
        base = base.monthly()
        other = other.monthly()

    deltas = compare_reports(base, other)

    if output_format == "json":
        output = {
            "base": {"inputs": base_inputs, "report": base.model_dump()},
            "scenario": {"inputs": other_inputs, "report": other.model_dump()},
            "deltas": deltas,
            "period": "monthly" if monthly else "annual",
        }
        click.echo(json.dumps(output, indent=2))
        return

    render_comparison(Console(width=140), base, other, deltas)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
