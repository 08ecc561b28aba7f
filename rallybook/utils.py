"""Utility functions for the application."""

from __future__ import annotations

from typing import Optional

from .core.constants import DEFAULT_CURRENCY_SYMBOL


def format_currency(amount: Optional[float], symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format an amount with two decimals, e.g. '₱1200.00'."""
    return f"{symbol}{(amount or 0.0):.2f}"


def format_hours(hours: Optional[float]) -> str:
    """Format a duration in hours with one decimal, e.g. '3.0 hours'."""
    return f"{(hours or 0.0):.1f} hours"


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    """Parse a boolean from an environment-style string."""
    if value is None:
        return default
    return value.strip().lower() in ["true", "1", "t"]
