"""Core utilities and shared functionality."""

from portfolio_ledger.core.timezone import (
    now_eastern,
    today_eastern,
    parse_date,
    EASTERN_TZ,
)
from portfolio_ledger.core.exceptions import (
    AppError,
    ValidationError,
    InvalidTransaction,
    NotFoundError,
    UnknownAccount,
    InsufficientFunds,
)

__all__ = [
    "now_eastern",
    "today_eastern",
    "parse_date",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "InvalidTransaction",
    "NotFoundError",
    "UnknownAccount",
    "InsufficientFunds",
]
