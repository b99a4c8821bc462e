"""OCC ticker models, codec, builder and batch decoding."""
from __future__ import annotations

from occkit.options.models import ContractIdentity, OptionType
from occkit.options.errors import (
    TickerError,
    TooShort,
    InvalidUnderlying,
    InvalidDate,
    InvalidOptionType,
    InvalidStrike,
    StrikeOutOfRange,
    StrikePrecisionLoss,
    MissingField,
)
from occkit.options.codec import (
    TickerCodec,
    default_codec,
    parse,
    try_parse,
    render,
    create,
    canonicalize,
)
from occkit.options.builder import TickerBuilder

__all__ = [
    "ContractIdentity",
    "OptionType",
    "TickerError",
    "TooShort",
    "InvalidUnderlying",
    "InvalidDate",
    "InvalidOptionType",
    "InvalidStrike",
    "StrikeOutOfRange",
    "StrikePrecisionLoss",
    "MissingField",
    "TickerCodec",
    "default_codec",
    "parse",
    "try_parse",
    "render",
    "create",
    "canonicalize",
    "TickerBuilder",
]
