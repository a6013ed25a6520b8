"""Profile CLI commands for Salary Report.

Manages user profile data (profile.yaml) - default calculator inputs.
"""

import click
import yaml

from salaryreport.sdk import (
    BUILTIN_DEFAULTS,
    get_profile_path,
    load_profile,
    save_profile,
    set_profile_value,
    load_input_defaults,
    ProfileValidationError,
)


# Keys accepted by 'profile set', with the type used to parse the value
PROFILE_KEYS = {
    "defaults.pre_tax": float,
    "defaults.dependents": int,
    "defaults.non_taxable": float,
}


@click.group()
def profile():
    """Manage profile data (profile.yaml).

    The profile holds default inputs used when an option is not given
    on the command line:

    \b
    defaults:
      pre_tax: 22000000
      dependents: 1
      non_taxable: 1200000
    """
    pass


@profile.command("show")
def profile_show():
    """Show the active profile and its effective defaults."""
    profile_path = get_profile_path()

    click.echo(f"Profile path: {profile_path}")
    click.echo(f"File exists: {profile_path.exists()}")

    profile_data = load_profile(require_exists=False)

    try:
        defaults = load_input_defaults(profile_data)
    except ProfileValidationError as e:
        click.echo()
        click.echo("Validation Errors (profile is invalid):")
        click.echo(f"  ! {e}")
        raise click.ClickException("Profile has validation errors. Fix them before continuing.")

    click.echo()
    click.echo("Effective defaults:")
    for key, builtin in BUILTIN_DEFAULTS.items():
        value = getattr(defaults, key)
        if value is None:
            click.echo(f"  {key}: {builtin} (built-in)")
        else:
            click.echo(f"  {key}: {value}")

    if profile_data:
        click.echo()
        click.echo("---")
        click.echo(yaml.dump(profile_data, default_flow_style=False, sort_keys=False))


@profile.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing profile")
def profile_init(force):
    """Create a profile.yaml populated with the built-in defaults."""
    profile_path = get_profile_path()

    if profile_path.exists() and not force:
        raise click.ClickException(
            f"Profile already exists: {profile_path}\n"
            f"Use --force to overwrite."
        )

    saved = save_profile({"defaults": dict(BUILTIN_DEFAULTS)}, profile_path)
    click.echo(f"Created profile: {saved}")


@profile.command("set")
@click.argument("key")
@click.argument("value")
def profile_set(key, value):
    """Set a profile value by dot-notation KEY.

    Examples:

    \b
      salary-report profile set defaults.pre_tax 45000000
      salary-report profile set defaults.dependents 3
    """
    if key not in PROFILE_KEYS:
        raise click.BadParameter(
            f"Unknown key '{key}'. Valid keys: {', '.join(PROFILE_KEYS)}",
            param_hint="KEY",
        )

    try:
        parsed = PROFILE_KEYS[key](value)
    except ValueError:
        raise click.BadParameter(f"Invalid value for {key}: {value}", param_hint="VALUE")

    # Validate before writing so a bad value never lands in the file
    candidate = load_profile(require_exists=False)
    candidate.setdefault("defaults", {})
    if not isinstance(candidate["defaults"], dict):
        candidate["defaults"] = {}
    candidate["defaults"][key.split(".", 1)[1]] = parsed
    try:
        load_input_defaults(candidate)
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    saved = set_profile_value(key, parsed)
    click.echo(f"Set {key} = {parsed}")
    click.echo(f"Saved to: {saved}")
