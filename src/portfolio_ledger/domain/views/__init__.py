"""View models for service outputs."""

from portfolio_ledger.domain.views.portfolio import (
    Holding,
    AllocationItem,
    AllocationView,
    PortfolioSummary,
    DividendSummary,
    StockInfo,
    DividendEstimate,
)

__all__ = [
    "Holding",
    "AllocationItem",
    "AllocationView",
    "PortfolioSummary",
    "DividendSummary",
    "StockInfo",
    "DividendEstimate",
]
