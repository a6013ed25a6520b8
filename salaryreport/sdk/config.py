"""Configuration management for Salary Report.

Configuration is split into two files:

1. settings.json - Machine-specific, ephemeral settings
   - profile: path to profile.yaml (optional, if not colocated)
   - default_output_format: text, json or csv

2. profile.yaml - User's personal configuration
   - defaults: calculator inputs used when not given on the command line
     (pre_tax, dependents, non_taxable)

Config directory resolution:
1. SALARY_REPORT_CONFIG_PATH environment variable (if set)
2. ~/.config/salary-report/ (XDG_CONFIG_HOME fallback)

Profile resolution:
1. settings.json "profile" key (if set via CLI)
2. profile.yaml in same config directory
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .schemas import (
    DEFAULT_DEPENDENTS,
    DEFAULT_NON_TAXABLE,
    DEFAULT_PRE_TAX,
    InputDefaults,
)

logger = logging.getLogger(__name__)

APP_NAME = "salary-report"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"

OUTPUT_FORMATS = ("text", "json", "csv")

BUILTIN_DEFAULTS = {
    "pre_tax": DEFAULT_PRE_TAX,
    "dependents": DEFAULT_DEPENDENTS,
    "non_taxable": DEFAULT_NON_TAXABLE,
}


class SettingsError(Exception):
    """Raised when settings.json holds an unusable value."""
    pass


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


class ProfileValidationError(Exception):
    """Raised when the profile 'defaults' section is invalid."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. SALARY_REPORT_CONFIG_PATH environment variable
    2. ~/.config/salary-report/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    # 1. Check environment variable
    env_path = os.environ.get("SALARY_REPORT_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    # 2. Fall back to XDG config path
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json."""
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def get_output_format() -> str:
    """Get the preferred output format (default: text).

    Raises:
        SettingsError: If default_output_format is not a known format
    """
    value = get_setting("default_output_format", "text")
    if value not in OUTPUT_FORMATS:
        raise SettingsError(
            f"Invalid default_output_format '{value}' in {get_settings_path()}. "
            f"Expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
    return value


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to the profile.yaml file.

    Resolution order:
    1. settings.json "profile" key (if set)
    2. profile.yaml in config directory

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    # 1. Check settings.json for custom profile path
    custom_profile = get_setting("profile")
    if custom_profile:
        profile_path = Path(custom_profile)
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}\n\n"
                f"Create it with: salary-report profile init"
            )
        return profile_path

    # 2. profile.yaml in config directory
    profile_path = get_config_dir() / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found. Checked:\n"
            f"  1. settings.json 'profile' key (not set)\n"
            f"  2. {profile_path} (not found)\n\n"
            f"Create a profile with: salary-report profile init"
        )

    return profile_path


def load_profile(require_exists: bool = True) -> dict:
    """Load user profile from profile.yaml.

    Returns:
        Profile dictionary (empty dict if not required and not found)

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return {}

    with open(profile_path, "r") as f:
        return yaml.safe_load(f) or {}


def save_profile(profile: dict, path: Optional[Path] = None) -> Path:
    """Save user profile to profile.yaml.

    Returns:
        Path to the saved profile file
    """
    if path is None:
        path = get_profile_path(require_exists=False)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False)

    return path


def set_profile_value(key: str, value: Any) -> Path:
    """Set a profile value by dot-notation key, creating nested sections."""
    profile = load_profile(require_exists=False)

    parts = key.split(".")
    current = profile

    # Navigate/create nested structure
    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]

    current[parts[-1]] = value

    return save_profile(profile)


def load_input_defaults(profile: Optional[dict] = None) -> InputDefaults:
    """Load and validate the 'defaults' section of the profile.

    Args:
        profile: Profile dict (loaded from profile.yaml if not given)

    Raises:
        ProfileValidationError: If the section has unknown keys or bad values
    """
    if profile is None:
        profile = load_profile(require_exists=False)

    section = profile.get("defaults") or {}
    if not isinstance(section, dict):
        raise ProfileValidationError(
            f"profile 'defaults' must be a mapping, got {type(section).__name__}"
        )

    try:
        return InputDefaults(**section)
    except ValidationError as e:
        errors = [f"defaults.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ProfileValidationError("; ".join(errors))


def resolve_inputs(
    pre_tax: Optional[float] = None,
    dependents: Optional[int] = None,
    non_taxable: Optional[float] = None,
    profile: Optional[dict] = None,
) -> Dict[str, Any]:
    """Resolve calculator inputs.

    Resolution order per field:
    1. Explicit argument (command line)
    2. profile.yaml 'defaults'
    3. Built-in defaults

    Returns:
        Dict with:
            - inputs: {pre_tax, dependents, non_taxable}
            - sources: per-field source metadata for display
    """
    explicit = {"pre_tax": pre_tax, "dependents": dependents, "non_taxable": non_taxable}
    profile_defaults = load_input_defaults(profile).model_dump()

    inputs = {}
    sources = {}
    for name, value in explicit.items():
        if value is not None:
            inputs[name] = value
            sources[name] = {"type": "override", "note": "command line"}
        elif profile_defaults.get(name) is not None:
            inputs[name] = profile_defaults[name]
            sources[name] = {"type": "registered", "note": "profile defaults"}
        else:
            inputs[name] = BUILTIN_DEFAULTS[name]
            sources[name] = {"type": "default", "note": "built-in"}

    logger.debug(f"resolved inputs: {inputs}")
    return {"inputs": inputs, "sources": sources}
