"""Service layer - ledger engine and orchestration."""

from portfolio_ledger.services.ledger_service import LedgerService, TransactionCreate
from portfolio_ledger.services.market_data_service import MarketDataService
from portfolio_ledger.services.analysis_service import AnalysisService

__all__ = [
    "LedgerService",
    "TransactionCreate",
    "MarketDataService",
    "AnalysisService",
]
