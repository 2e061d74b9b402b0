"""Domain layer - pure ledger models with no external dependencies."""

from portfolio_ledger.domain.models import (
    Account,
    Transaction,
    Dividend,
    PortfolioState,
    TransactionType,
    Currency,
    ReplayOrder,
)

__all__ = [
    "Account",
    "Transaction",
    "Dividend",
    "PortfolioState",
    "TransactionType",
    "Currency",
    "ReplayOrder",
]
