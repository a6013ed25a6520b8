"""Salary Report SDK - Core functionality for salary withholding breakdowns."""

from .config import (
    # Settings (machine-specific)
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_output_format,
    OUTPUT_FORMATS,
    SettingsError,
    # Profile (user data)
    get_profile_path,
    load_profile,
    save_profile,
    set_profile_value,
    ProfileNotFoundError,
    ProfileValidationError,
    # Input resolution
    load_input_defaults,
    resolve_inputs,
    BUILTIN_DEFAULTS,
)

from .schemas import (
    InputDefaults,
    InsuranceAmounts,
    DeductionSet,
    SalaryReport,
)

from .report import (
    MAX_TABLE_ROWS,
    compute_salary_report,
    salary_table,
    compare_reports,
    reports_to_csv,
)

__all__ = [
    # Settings
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "get_output_format",
    "OUTPUT_FORMATS",
    "SettingsError",
    # Profile
    "get_profile_path",
    "load_profile",
    "save_profile",
    "set_profile_value",
    "ProfileNotFoundError",
    "ProfileValidationError",
    # Input resolution
    "load_input_defaults",
    "resolve_inputs",
    "BUILTIN_DEFAULTS",
    # Schemas
    "InputDefaults",
    "InsuranceAmounts",
    "DeductionSet",
    "SalaryReport",
    # Report
    "MAX_TABLE_ROWS",
    "compute_salary_report",
    "salary_table",
    "compare_reports",
    "reports_to_csv",
]
