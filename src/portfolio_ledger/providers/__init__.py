"""Market data providers module."""

from portfolio_ledger.providers.market_data_provider import MarketDataProvider
from portfolio_ledger.providers.stub_provider import StubMarketDataProvider

__all__ = [
    "MarketDataProvider",
    "StubMarketDataProvider",
]
