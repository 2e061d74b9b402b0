"""Market data provider protocol."""

from typing import Optional, Protocol

from portfolio_ledger.domain.views import DividendEstimate, StockInfo


class MarketDataProvider(Protocol):
    """
    Protocol for stock metadata, price and dividend lookups.

    Implementations return None when a symbol is unavailable. They may also
    raise on network failure; MarketDataService degrades gracefully.
    """

    def get_stock_info(self, symbol: str) -> Optional[StockInfo]:
        """Return name, sector, price and dividend yield for a symbol."""
        ...

    def estimate_dividend(self, symbol: str) -> Optional[DividendEstimate]:
        """Return the estimated annual per-share dividend for a symbol."""
        ...
