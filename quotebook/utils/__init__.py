"""Utilities package for common functions."""

from .parsing import parse_amount, is_iso_date, today_iso, add_days

__all__ = ['parse_amount', 'is_iso_date', 'today_iso', 'add_days']
