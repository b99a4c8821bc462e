"""
Display formatting utilities for CLI output.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Union


def fmt_strike(x: Optional[Union[Decimal, float, int]]) -> str:
    """Format a strike as dollars, keeping sub-cent digits when present (e.g. $150.125)."""
    if x is None:
        return "n/a"
    d = x if isinstance(x, Decimal) else Decimal(str(x))
    if d == d.quantize(Decimal("0.01")):
        return f"${d:,.2f}"
    return f"${d:,.3f}"


def fmt_date(d: Optional[date], fmt: str = "%Y-%m-%d") -> str:
    """Format date to string, returns 'n/a' if None."""
    if d is None:
        return "n/a"
    return d.strftime(fmt)


def fmt_dte(expiration: Optional[date], today: Optional[date] = None) -> str:
    """Days to expiration, e.g. '42d' or 'expired'."""
    if expiration is None:
        return "n/a"
    days = (expiration - (today or date.today())).days
    return "expired" if days < 0 else f"{days}d"
