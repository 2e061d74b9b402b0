"""Analysis service: portfolio figures marked to market data."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from portfolio_ledger.core.timezone import today_eastern
from portfolio_ledger.domain.models import PortfolioState
from portfolio_ledger.domain.views import (
    AllocationItem,
    DividendSummary,
    Holding,
    PortfolioSummary,
)
from portfolio_ledger.services import portfolio_aggregator
from portfolio_ledger.services.dividend_scheduler import summarize_dividends
from portfolio_ledger.services.ledger_service import LedgerService
from portfolio_ledger.services.market_data_service import MarketDataService
from portfolio_ledger.services.position_aggregator import apply_prices

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Service for portfolio analytics and reporting.

    Resolves prices through MarketDataService and hands the already-resolved
    numbers to the pure aggregators.
    """

    def __init__(
        self,
        ledger_service: LedgerService,
        market_data_service: MarketDataService,
        allocation_top_n: int = 5,
    ):
        self._ledger = ledger_service
        self._market = market_data_service
        self._top_n = allocation_top_n

    def resolve_prices(self, state: PortfolioState) -> dict[str, Decimal]:
        """Best-known price for every symbol held in any account."""
        prices: dict[str, Decimal] = {}
        for account in state.accounts:
            held = [
                h for h in self._ledger.get_holdings(state, account.id)
                if h.symbol not in prices
            ]
            prices.update(self._market.resolve_prices(held))
        return prices

    def holdings_with_prices(self, state: PortfolioState, account_id: str) -> list[Holding]:
        """Account holdings marked to resolved prices."""
        holdings = self._ledger.get_holdings(state, account_id)
        return apply_prices(holdings, self._market.resolve_prices(holdings))

    def summary(self, state: PortfolioState) -> PortfolioSummary:
        """Net worth, cash, invested, P/L and allocation at current prices."""
        return portfolio_aggregator.summarize(
            state.accounts,
            state.transactions,
            prices=self.resolve_prices(state),
            order=self._ledger.replay_order,
        )

    def allocation_chart(self, state: PortfolioState) -> list[AllocationItem]:
        return portfolio_aggregator.allocation_chart(
            state.accounts,
            state.transactions,
            top_n=self._top_n,
            prices=self.resolve_prices(state),
            order=self._ledger.replay_order,
        )

    def dividend_summary(
        self,
        state: PortfolioState,
        as_of: Optional[date] = None,
    ) -> DividendSummary:
        return summarize_dividends(state.dividends, as_of=as_of or today_eastern())

    def project_dividends(
        self,
        state: PortfolioState,
        account_id: str,
        symbol: str,
        as_of: Optional[date] = None,
    ) -> PortfolioState:
        """
        Schedule a holding's next four dividends from a market estimate.

        Skipped (state returned as-is) when no estimate is available or the
        estimate is not positive.
        """
        state.get_account(account_id)
        estimate = self._market.estimate_dividend(symbol)
        if estimate is None or estimate.annual_amount <= 0:
            logger.info("No dividend estimate for %s; schedule not generated", symbol)
            return state
        return self._ledger.schedule_dividends(
            state,
            account_id=account_id,
            symbol=symbol,
            per_share_annual_amount=estimate.annual_amount,
            as_of=as_of,
        )
