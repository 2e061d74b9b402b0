"""Market data service for stock lookups and dividend estimates."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from portfolio_ledger.core.timezone import now_eastern
from portfolio_ledger.domain.views import DividendEstimate, Holding, StockInfo
from portfolio_ledger.providers.market_data_provider import MarketDataProvider

logger = logging.getLogger(__name__)


class MarketDataService:
    """
    Service for fetching stock info and dividend estimates.

    Wraps provider with caching and graceful degradation: a failing provider
    is logged and treated as "unavailable", never raised to the caller.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        cache_ttl_seconds: int = 60,
    ):
        self._provider = provider
        self._cache_ttl = cache_ttl_seconds
        self._info_cache: dict[str, tuple[StockInfo, datetime]] = {}

    def get_stock_info(self, symbol: str) -> Optional[StockInfo]:
        """
        Look up a symbol, using cached data if within TTL.

        Falls back to stale cache on provider failure; None if nothing known.
        """
        symbol = symbol.upper()
        cached = self._info_cache.get(symbol)
        if cached and self._is_fresh(cached[1]):
            return cached[0]

        try:
            info = self._provider.get_stock_info(symbol)
        except Exception:
            logger.warning("Stock lookup failed for %s; using cached data", symbol, exc_info=True)
            return cached[0] if cached else None

        if info is not None:
            self._info_cache[symbol] = (info, now_eastern())
        elif cached:
            return cached[0]
        return info

    def resolve_prices(self, holdings: Sequence[Holding]) -> dict[str, Decimal]:
        """
        Map each held symbol to its best-known price.

        Unavailable lookups fall back to the holding's current price, or 0.
        """
        prices: dict[str, Decimal] = {}
        for holding in holdings:
            info = self.get_stock_info(holding.symbol)
            if info is not None:
                prices[holding.symbol] = info.price
            else:
                prices[holding.symbol] = holding.current_price or Decimal("0")
        return prices

    def estimate_dividend(self, symbol: str) -> Optional[DividendEstimate]:
        """Fetch an annual dividend estimate; None when unavailable."""
        try:
            return self._provider.estimate_dividend(symbol.upper())
        except Exception:
            logger.warning("Dividend estimate failed for %s", symbol, exc_info=True)
            return None

    def clear_cache(self) -> None:
        self._info_cache.clear()

    def _is_fresh(self, fetched_at: datetime) -> bool:
        elapsed = (now_eastern() - fetched_at).total_seconds()
        return elapsed < self._cache_ttl
