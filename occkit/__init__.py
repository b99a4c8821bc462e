"""occkit: OCC option ticker codec."""
from __future__ import annotations

from occkit.options import (
    ContractIdentity,
    OptionType,
    TickerBuilder,
    TickerCodec,
    TickerError,
    canonicalize,
    create,
    parse,
    render,
    try_parse,
)

__all__ = [
    "ContractIdentity",
    "OptionType",
    "TickerBuilder",
    "TickerCodec",
    "TickerError",
    "canonicalize",
    "create",
    "parse",
    "render",
    "try_parse",
]
