"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Types of ledger transactions."""

    BUY = "BUY"
    SELL = "SELL"
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"


class Currency(str, Enum):
    """Account currencies. Values are aggregated without conversion."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    HKD = "HKD"


class ReplayOrder(str, Enum):
    """Order in which an account's ledger is folded into holdings."""

    INSERTION = "INSERTION"  # ledger order as stored (oldest first)
    DATE = "DATE"  # stable sort by trade date, insertion order breaks ties
