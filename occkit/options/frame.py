"""
Batch decoding of OCC tickers into a DataFrame.

Option chains and position lists arrive as plain symbol lists; this turns
them into one row per ticker so they can be filtered like any other chain.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

import pandas as pd

from occkit.options.codec import TickerCodec, default_codec
from occkit.options.errors import TickerError

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["ticker", "underlying", "expiration", "option_type", "strike", "error"]


def contracts_frame(tickers: Iterable[str], codec: Optional[TickerCodec] = None) -> pd.DataFrame:
    """
    Decode tickers into a DataFrame.

    Columns: ticker, underlying, expiration, option_type, strike, error.
    Rows that fail keep the input ticker, null contract fields, and the
    error class name (e.g. "InvalidDate") in `error`.
    """
    codec = codec or default_codec()
    rows = []
    for raw in tickers:
        symbol = str(raw).strip()
        try:
            c = codec.parse(symbol)
        except TickerError as e:
            rows.append({"ticker": symbol, "underlying": None, "expiration": None,
                         "option_type": None, "strike": None, "error": type(e).__name__})
            continue
        rows.append({
            "ticker": symbol,
            "underlying": c.underlying,
            "expiration": c.expiration,
            "option_type": c.option_type.value,
            "strike": c.strike,
            "error": None,
        })

    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    n_bad = int(df["error"].notna().sum())
    if n_bad:
        logger.info("Decoded %d OCC tickers, %d rejected", len(df), n_bad)
    return df


def error_counts(df: pd.DataFrame) -> dict[str, int]:
    """Count rejected rows per error class."""
    errs = df["error"].dropna()
    return {str(k): int(v) for k, v in errs.value_counts().items()}
