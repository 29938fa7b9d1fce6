"""Utility functions for datepick."""

from .dates import add_days, add_months, add_years, first_of_month, format_date, last_of_month

__all__ = [
    "add_days",
    "add_months",
    "add_years",
    "first_of_month",
    "format_date",
    "last_of_month",
]
