"""Portfolio ledger engine: replays transactions into holdings and net worth."""

from portfolio_ledger.domain.models import (
    Account,
    Currency,
    Dividend,
    PortfolioState,
    ReplayOrder,
    Transaction,
    TransactionType,
)
from portfolio_ledger.domain.views import Holding
from portfolio_ledger.services.position_aggregator import compute_holdings
from portfolio_ledger.services.balance_updater import apply_transaction
from portfolio_ledger.services.portfolio_aggregator import total_worth
from portfolio_ledger.services.dividend_scheduler import generate_schedule, toggle_received

__version__ = "0.1.0"

__all__ = [
    "Account",
    "Currency",
    "Dividend",
    "PortfolioState",
    "ReplayOrder",
    "Transaction",
    "TransactionType",
    "Holding",
    "compute_holdings",
    "apply_transaction",
    "total_worth",
    "generate_schedule",
    "toggle_received",
]
