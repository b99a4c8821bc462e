"""
Fluent, step-wise assembly of a ContractIdentity.

Usage:
    ticker = (
        TickerBuilder()
        .with_underlying("TSLA")
        .with_expiration(2026, 3, 20)
        .as_call()
        .with_strike(700)
        .build_ticker()
    )
    # "O:TSLA260320C00700000"

A builder is a single-writer accumulator; give each construction its own
instance. It only checks that every field is present: value validation
belongs to TickerCodec.render, which build_ticker() calls.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Optional

from occkit.options.codec import TickerCodec, default_codec
from occkit.options.errors import InvalidDate, MissingField
from occkit.options.models import ContractIdentity, OptionType


class TickerBuilder:
    def __init__(self, codec: Optional[TickerCodec] = None):
        self._codec = codec
        self._underlying: Optional[str] = None
        self._expiration: Optional[date] = None
        self._type: Optional[OptionType] = None
        self._strike: Any = None

    def with_underlying(self, underlying: str) -> "TickerBuilder":
        self._underlying = underlying.upper() if isinstance(underlying, str) else underlying
        return self

    def with_expiration(self, year_or_date: date | int, month: Optional[int] = None, day: Optional[int] = None) -> "TickerBuilder":
        """Set expiration from a date, or from (year, month, day)."""
        if isinstance(year_or_date, date):
            if month is not None or day is not None:
                raise TypeError("Pass either a date or year, month, day, not both.")
            self._expiration = year_or_date
            return self
        if month is None or day is None:
            raise TypeError("with_expiration(year, month, day) needs all three components.")
        try:
            self._expiration = date(year_or_date, month, day)
        except (ValueError, TypeError) as e:
            raise InvalidDate(f"Invalid expiration {year_or_date}-{month}-{day}: {e}.", value=(year_or_date, month, day)) from None
        return self

    def as_call(self) -> "TickerBuilder":
        self._type = OptionType.CALL
        return self

    def as_put(self) -> "TickerBuilder":
        self._type = OptionType.PUT
        return self

    def with_type(self, option_type: OptionType | str) -> "TickerBuilder":
        self._type = OptionType.coerce(option_type)
        return self

    def with_strike(self, strike: Any) -> "TickerBuilder":
        self._strike = strike
        return self

    def reset(self) -> "TickerBuilder":
        """Clear every field so the builder can be reused."""
        self._underlying = None
        self._expiration = None
        self._type = None
        self._strike = None
        return self

    @property
    def is_complete(self) -> bool:
        return not self._missing()

    def _missing(self) -> list[str]:
        fields = [
            ("underlying", self._underlying),
            ("expiration", self._expiration),
            ("option_type", self._type),
            ("strike", self._strike),
        ]
        return [name for name, value in fields if value is None]

    def build(self) -> ContractIdentity:
        """
        Assemble the ContractIdentity.

        Raises:
            MissingField: naming the first unset field. The builder is left as
                it was, so the caller can set the field and retry.
        """
        missing = self._missing()
        if missing:
            raise MissingField(missing[0])
        return ContractIdentity(
            underlying=self._underlying,
            expiration=self._expiration,
            option_type=self._type,
            strike=self._strike,
        )

    def build_ticker(self) -> str:
        """Build and render the canonical ticker."""
        identity = self.build()
        codec = self._codec or default_codec()
        return codec.render(identity)
