from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional

from occkit.options.errors import InvalidOptionType, InvalidStrike

_NUMERIC = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class OptionType(str, Enum):
    """Option contract type."""
    CALL = "call"
    PUT = "put"

    @property
    def code(self) -> str:
        """Single wire character ('C' or 'P')."""
        return _TYPE_TO_CODE[self]

    @classmethod
    def from_code(cls, code: str) -> "OptionType":
        try:
            return _CODE_TO_TYPE[code]
        except (KeyError, TypeError):
            raise InvalidOptionType(f"Unknown call/put code {code!r}.", value=code) from None

    @classmethod
    def lookup(cls, value: Any) -> Optional["OptionType"]:
        """Member for a member, 'call'/'put' (any case) or 'C'/'P'; None otherwise."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        v = value.strip()
        if v in _CODE_TO_TYPE:
            return _CODE_TO_TYPE[v]
        return _VALUE_TO_TYPE.get(v.lower())

    @classmethod
    def coerce(cls, value: "OptionType | str") -> "OptionType":
        """Accept a member, its value ('call'/'put') or its wire char ('C'/'P')."""
        found = cls.lookup(value)
        if found is None:
            raise InvalidOptionType(f"Unknown option type {value!r}.", value=value)
        return found


_TYPE_TO_CODE = {OptionType.CALL: "C", OptionType.PUT: "P"}
_CODE_TO_TYPE = {code: t for t, code in _TYPE_TO_CODE.items()}
_VALUE_TO_TYPE = {t.value: t for t in OptionType}


def to_strike(value: Any) -> Decimal:
    """
    Coerce a strike to Decimal without binary rounding.

    Floats go through their shortest repr, so 650.25 becomes Decimal("650.25").
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidStrike(f"Strike must be numeric, got {value!r}.", value=value)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise InvalidStrike(f"Strike {value!r} is not a number.", value=value) from None
    raise InvalidStrike(f"Strike must be numeric, got {value!r}.", value=value)


def _is_convertible_strike(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and _NUMERIC.fullmatch(value.strip()) is not None


@dataclass(frozen=True)
class ContractIdentity:
    """
    Structured identity of one listed option contract.

    Loose but unambiguous inputs are normalized on construction: int, float
    and numeric str strikes become Decimal, 'call'/'put'/'C'/'P' become
    OptionType, and a datetime expiration is reduced to its date. Anything
    else is kept as given; TickerCodec.render checks every field before
    producing a ticker.
    """
    underlying: str
    expiration: date
    option_type: OptionType
    strike: Decimal

    def __post_init__(self):
        if isinstance(self.expiration, datetime):
            object.__setattr__(self, "expiration", self.expiration.date())
        opt_type = OptionType.lookup(self.option_type)
        if opt_type is not None:
            object.__setattr__(self, "option_type", opt_type)
        if _is_convertible_strike(self.strike):
            object.__setattr__(self, "strike", to_strike(self.strike))

    def __str__(self) -> str:
        from occkit.options.codec import default_codec

        return default_codec().render(self)

    @property
    def is_call(self) -> bool:
        return self.option_type == OptionType.CALL

    @property
    def is_put(self) -> bool:
        return self.option_type == OptionType.PUT
