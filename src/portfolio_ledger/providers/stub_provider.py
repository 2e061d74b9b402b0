"""Stub market data provider for offline/testing use."""

from decimal import Decimal
from typing import Optional

from portfolio_ledger.domain.views import DividendEstimate, StockInfo


# Deterministic fake data: name, sector, price, annual dividend per share
_STUB_STOCKS: dict[str, tuple[str, str, Decimal, Decimal]] = {
    "AAPL": ("Apple Inc.", "Technology", Decimal("185.50"), Decimal("0.96")),
    "MSFT": ("Microsoft Corporation", "Technology", Decimal("378.25"), Decimal("3.00")),
    "GOOGL": ("Alphabet Inc.", "Communication Services", Decimal("142.75"), Decimal("0")),
    "AMZN": ("Amazon.com Inc.", "Consumer Discretionary", Decimal("178.50"), Decimal("0")),
    "KO": ("The Coca-Cola Company", "Consumer Staples", Decimal("59.80"), Decimal("1.94")),
    "JNJ": ("Johnson & Johnson", "Health Care", Decimal("156.40"), Decimal("4.76")),
    "XOM": ("Exxon Mobil Corporation", "Energy", Decimal("104.20"), Decimal("3.80")),
    "SPY": ("SPDR S&P 500 ETF Trust", "ETF", Decimal("485.25"), Decimal("6.50")),
    "VTI": ("Vanguard Total Stock Market ETF", "ETF", Decimal("252.30"), Decimal("3.60")),
}


class StubMarketDataProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Unknown symbols are reported as unavailable.
    """

    def get_stock_info(self, symbol: str) -> Optional[StockInfo]:
        upper_symbol = symbol.upper()
        if upper_symbol not in _STUB_STOCKS:
            return None
        name, sector, price, annual = _STUB_STOCKS[upper_symbol]
        dividend_yield = (annual / price).quantize(Decimal("0.0001")) if annual else None
        return StockInfo(
            symbol=upper_symbol,
            name=name,
            sector=sector,
            price=price,
            dividend_yield=dividend_yield,
        )

    def estimate_dividend(self, symbol: str) -> Optional[DividendEstimate]:
        upper_symbol = symbol.upper()
        if upper_symbol not in _STUB_STOCKS:
            return None
        annual = _STUB_STOCKS[upper_symbol][3]
        return DividendEstimate(
            symbol=upper_symbol,
            annual_amount=annual,
            frequency="Quarterly" if annual else "None",
        )
