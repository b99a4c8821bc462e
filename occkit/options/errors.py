"""
Error taxonomy for OCC ticker parsing, rendering and building.

All errors are deterministic: a malformed ticker will never become
well-formed by retrying. They subclass ValueError so callers that already
guard OCC parsing with `except ValueError` keep working.
"""
from __future__ import annotations

from typing import Any


class TickerError(ValueError):
    """Base class for every OCC ticker error."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class TooShort(TickerError):
    """Input shorter than one root character plus the 15-character suffix."""


class InvalidUnderlying(TickerError):
    """Underlying root is empty or contains disallowed characters."""


class InvalidDate(TickerError):
    """Non-digit date field, invalid calendar date, or unencodable year."""


class InvalidOptionType(TickerError):
    """Type character is neither 'C' nor 'P'."""


class InvalidStrike(TickerError):
    """Strike field is not eight digits, or strike is not numeric."""


class StrikeOutOfRange(TickerError):
    """Strike is negative, non-finite, or above 99999.999."""


class StrikePrecisionLoss(TickerError):
    """Strike has sub-thousandth precision that cannot round-trip."""


class MissingField(TickerError):
    """TickerBuilder.build() called before every field was set."""

    def __init__(self, field: str):
        super().__init__(f"{field} must be set before building.", value=field)
        self.field = field
