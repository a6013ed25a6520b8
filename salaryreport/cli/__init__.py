"""Salary Report CLI."""
