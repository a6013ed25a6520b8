"""Salary Report - Annual salary withholding breakdown."""

__version__ = "0.3.0"
