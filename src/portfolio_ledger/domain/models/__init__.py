"""Domain models package."""

from portfolio_ledger.domain.models.enums import TransactionType, Currency, ReplayOrder
from portfolio_ledger.domain.models.account import Account
from portfolio_ledger.domain.models.transaction import Transaction
from portfolio_ledger.domain.models.dividend import Dividend
from portfolio_ledger.domain.models.state import PortfolioState

__all__ = [
    "TransactionType",
    "Currency",
    "ReplayOrder",
    "Account",
    "Transaction",
    "Dividend",
    "PortfolioState",
]
