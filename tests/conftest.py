"""
Pytest configuration and shared fixtures for occkit tests.

Usage:
    @pytest.fixture functions are automatically available to all tests.
"""
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest


def pytest_configure():
    """
    Ensure the repo root is on sys.path for the flat-layout package import (`occkit`).
    This keeps tests runnable without requiring an editable install.
    """
    root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))


# =============================================================================
# Codec Fixtures
# =============================================================================

@pytest.fixture
def codec():
    """Codec with the default root policy (letters and digits)."""
    from occkit.options.codec import TickerCodec
    return TickerCodec()


@pytest.fixture
def letters_codec():
    """Codec restricted to letter-only underlying roots."""
    from occkit.options.codec import TickerCodec
    return TickerCodec(allow_digit_roots=False)


@pytest.fixture(autouse=True)
def fresh_default_codec(monkeypatch):
    """Drop the cached module-level codec so env changes in a test take effect."""
    import occkit.options.codec as codec_module
    monkeypatch.setattr(codec_module, "_default", None)
    monkeypatch.delenv("OCC_ALLOW_DIGIT_ROOTS", raising=False)
    monkeypatch.delenv("OCC_LOG_LEVEL", raising=False)


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def spy_call():
    from occkit.options.models import ContractIdentity, OptionType
    return ContractIdentity(
        underlying="SPY",
        expiration=date(2025, 12, 19),
        option_type=OptionType.CALL,
        strike=Decimal("650"),
    )


@pytest.fixture
def sample_tickers() -> list[str]:
    """Mixed batch: prefixed, unprefixed and malformed tickers."""
    return [
        "O:SPY251219C00650000",
        "TSLA210903C00700000",
        "O:F211119P00014000",
        "O:AAPL241220C00150500",
        "SPY2512",                  # TooShort
        "O:SPY251340C00650000",     # InvalidDate
        "O:SPY251219X00650000",     # InvalidOptionType
    ]
