"""Settings CLI commands for Salary Report.

Manages settings.json - output preferences, profile path.
"""

from pathlib import Path

import click

from salaryreport.sdk import (
    OUTPUT_FORMATS,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_settings_path,
    get_profile_path,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - default_output_format: text, json or csv
    - profile: path to profile.yaml
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective values:")
    click.echo(f"  default_output_format: {current.get('default_output_format', 'text')}")
    click.echo(f"  profile: {get_profile_path()}")


@settings.command("format")
@click.argument("output_format", required=False, type=click.Choice(OUTPUT_FORMATS))
@click.option("--clear", is_flag=True, help="Clear preference, revert to text")
def settings_format(output_format, clear):
    """Set or clear the default output format.

    Examples:
        salary-report settings format json
        salary-report settings format --clear
    """
    if clear:
        current = load_settings()
        if "default_output_format" in current:
            del current["default_output_format"]
            save_settings(current)
            click.echo("Cleared default_output_format setting.")
        else:
            click.echo("default_output_format was not set.")
        return

    if not output_format:
        current_format = get_setting("default_output_format")
        if current_format:
            click.echo(f"Current default_output_format: {current_format}")
        else:
            click.echo("No default_output_format set. Using default: text")
        return

    set_setting("default_output_format", output_format)
    click.echo(f"Set default_output_format: {output_format}")
    click.echo(f"Saved to: {get_settings_path()}")


@settings.command("profile")
@click.argument("path", required=False, type=click.Path(dir_okay=False))
@click.option("--clear", is_flag=True, help="Clear custom path, use profile.yaml in the config directory")
def settings_profile(path, clear):
    """Set or clear the path to profile.yaml.

    Examples:
        salary-report settings profile ~/Documents/salary/profile.yaml
        salary-report settings profile --clear
    """
    if clear:
        current = load_settings()
        if "profile" in current:
            del current["profile"]
            save_settings(current)
            click.echo("Cleared profile setting.")
        else:
            click.echo("profile was not set.")
        click.echo(f"Profile path: {get_profile_path()}")
        return

    if not path:
        click.echo(f"Profile path: {get_profile_path()}")
        return

    profile_path = Path(path).expanduser().resolve()
    set_setting("profile", str(profile_path))
    click.echo(f"Set profile: {profile_path}")
    if not profile_path.exists():
        click.echo("Profile does not exist yet. Create it with: salary-report profile init")
    click.echo(f"Saved to: {get_settings_path()}")
