"""
OCC option ticker codec.

OCC sym format:  [O:]{root}{YY}{MM}{DD}{C/P}{strike*1000:08d}
Example:         O:SPY251219C00650000  ->  SPY, 2025-12-19, call, 650.000

The root has no delimiter, so the split is right-anchored on the fixed
15-character suffix. Parsing accepts the ticker with or without the "O:"
prefix; rendering always emits it.
"""
from __future__ import annotations

import logging
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from occkit.options.errors import (
    InvalidDate,
    InvalidStrike,
    InvalidUnderlying,
    StrikeOutOfRange,
    StrikePrecisionLoss,
    TickerError,
    TooShort,
)
from occkit.options.models import ContractIdentity, OptionType, to_strike

logger = logging.getLogger(__name__)

OCC_PREFIX = "O:"
SUFFIX_LEN = 15                     # YYMMDD + C/P + 8-digit strike
MIN_LEN = 1 + SUFFIX_LEN
MAX_STRIKE = Decimal("99999.999")

_DATE_DIGITS = re.compile(r"[0-9]{6}")
_STRIKE_DIGITS = re.compile(r"[0-9]{8}")
_ROOT_LETTERS = re.compile(r"[A-Z]+")
_ROOT_ALNUM = re.compile(r"[A-Z0-9]+")


class TickerCodec:
    """
    Bidirectional converter between OCC ticker strings and ContractIdentity.

    Holds no mutable state; one instance can be shared across threads.

    Args:
        allow_digit_roots: accept digits in the underlying root (index and
            adjusted-series roots such as "SPXW1"). When False, roots must be
            uppercase letters only.
    """

    def __init__(self, allow_digit_roots: bool = True):
        self.allow_digit_roots = allow_digit_roots
        self._root_pattern = _ROOT_ALNUM if allow_digit_roots else _ROOT_LETTERS

    def __repr__(self) -> str:
        return f"TickerCodec(allow_digit_roots={self.allow_digit_roots})"

    # ------------------------------------------------------------------
    # Decode
    # ------------------------------------------------------------------

    def parse(self, ticker: str) -> ContractIdentity:
        """
        Parse an OCC ticker into a ContractIdentity.

        Raises:
            TooShort, InvalidUnderlying, InvalidDate, InvalidOptionType,
            InvalidStrike: checked in that order.
        """
        body = ticker[len(OCC_PREFIX):] if ticker.startswith(OCC_PREFIX) else ticker
        if len(body) < MIN_LEN:
            raise TooShort(
                f"Ticker {ticker!r} too short to be OCC-style (root + YYMMDD + C/P + 8 strike).",
                value=ticker,
            )

        root, suffix = body[:-SUFFIX_LEN], body[-SUFFIX_LEN:]
        date_code = suffix[:6]
        cp_code = suffix[6]
        strike_code = suffix[7:]

        self._check_root(root)
        expiry = _decode_date(date_code)
        opt_type = OptionType.from_code(cp_code)

        if not _STRIKE_DIGITS.fullmatch(strike_code):
            raise InvalidStrike(f"Strike field {strike_code!r} is not 8 digits.", value=strike_code)
        strike = Decimal(int(strike_code)).scaleb(-3)

        return ContractIdentity(underlying=root, expiration=expiry, option_type=opt_type, strike=strike)

    def try_parse(self, ticker: Optional[str]) -> Optional[ContractIdentity]:
        """Parse, returning None instead of raising."""
        if not isinstance(ticker, str):
            return None
        try:
            return self.parse(ticker)
        except TickerError as e:
            logger.debug("Rejected OCC ticker %r: %s", ticker, e)
            return None

    # ------------------------------------------------------------------
    # Encode
    # ------------------------------------------------------------------

    def render(self, identity: ContractIdentity) -> str:
        """
        Render the canonical "O:"-prefixed ticker.

        Re-validates every field since a ContractIdentity can be built by hand.

        Raises:
            InvalidUnderlying, StrikeOutOfRange, StrikePrecisionLoss,
            InvalidStrike, InvalidDate, InvalidOptionType.
        """
        self._check_root(identity.underlying)
        strike_x1000 = _encode_strike(identity.strike)
        date_code = _encode_date(identity.expiration)
        cp_code = OptionType.coerce(identity.option_type).code
        return f"{OCC_PREFIX}{identity.underlying}{date_code}{cp_code}{strike_x1000:08d}"

    def create(
        self,
        underlying: str,
        expiration: date,
        option_type: OptionType | str,
        strike: Any,
    ) -> str:
        """
        One-shot render from loose components.

        The underlying is upper-cased and the option type may be given as
        "call"/"put" or "C"/"P".
        """
        if not isinstance(underlying, str):
            raise InvalidUnderlying(f"Underlying must be a string, got {underlying!r}.", value=underlying)
        identity = ContractIdentity(
            underlying=underlying.upper(),
            expiration=expiration,
            option_type=OptionType.coerce(option_type),
            strike=to_strike(strike),
        )
        return self.render(identity)

    def canonicalize(self, ticker: str) -> str:
        """Canonical (prefixed) form of an accepted ticker."""
        return self.render(self.parse(ticker))

    # ------------------------------------------------------------------

    def _check_root(self, root: Any) -> None:
        if not isinstance(root, str) or not root:
            raise InvalidUnderlying("Underlying root cannot be empty.", value=root)
        if not self._root_pattern.fullmatch(root):
            allowed = "uppercase letters and digits" if self.allow_digit_roots else "uppercase letters"
            raise InvalidUnderlying(f"Underlying {root!r} must contain only {allowed}.", value=root)


# ----------------------------------------------------------------------
# Field helpers
# ----------------------------------------------------------------------

def _decode_date(date_code: str) -> date:
    if not _DATE_DIGITS.fullmatch(date_code):
        raise InvalidDate(f"Date field {date_code!r} is not YYMMDD digits.", value=date_code)
    year = 2000 + int(date_code[0:2])
    month = int(date_code[2:4])
    day = int(date_code[4:6])
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDate(f"Date field {date_code!r} is not a calendar date: {e}.", value=date_code) from None


def _encode_date(expiration: Any) -> str:
    if isinstance(expiration, datetime):
        expiration = expiration.date()
    if not isinstance(expiration, date):
        raise InvalidDate(f"Expiration must be a date, got {expiration!r}.", value=expiration)
    if not 2000 <= expiration.year <= 2099:
        raise InvalidDate(f"Expiration year {expiration.year} cannot be encoded as YY.", value=expiration)
    return f"{expiration.year % 100:02d}{expiration.month:02d}{expiration.day:02d}"


def _encode_strike(value: Any) -> int:
    strike = to_strike(value)
    if not strike.is_finite():
        raise StrikeOutOfRange(f"Strike {value!r} is not finite.", value=value)
    if strike < 0:
        raise StrikeOutOfRange(f"Strike {value!r} cannot be negative.", value=value)
    if strike > MAX_STRIKE:
        raise StrikeOutOfRange(f"Strike {value!r} exceeds {MAX_STRIKE}.", value=value)
    # Digits below 1/1000 must all be zero; checked on the tuple so no context rounding applies.
    _, digits, exponent = strike.as_tuple()
    if exponent < -3 and any(digits[exponent + 3:]):
        raise StrikePrecisionLoss(f"Strike {value!r} has more than 3 decimal places.", value=value)
    return int(strike.scaleb(3))


# ----------------------------------------------------------------------
# Module-level API over a shared default codec
# ----------------------------------------------------------------------

_default: Optional[TickerCodec] = None


def default_codec() -> TickerCodec:
    """Codec configured from Settings, created on first use."""
    global _default
    if _default is None:
        from occkit.config import load_settings

        _default = TickerCodec(allow_digit_roots=load_settings().allow_digit_roots)
    return _default


def parse(ticker: str) -> ContractIdentity:
    return default_codec().parse(ticker)


def try_parse(ticker: Optional[str]) -> Optional[ContractIdentity]:
    return default_codec().try_parse(ticker)


def render(identity: ContractIdentity) -> str:
    return default_codec().render(identity)


def create(underlying: str, expiration: date, option_type: OptionType | str, strike: Any) -> str:
    return default_codec().create(underlying, expiration, option_type, strike)


def canonicalize(ticker: str) -> str:
    return default_codec().canonicalize(ticker)
