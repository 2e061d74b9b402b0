"""
Pytest configuration and fixtures for portfolio ledger tests.

This module provides:
- Factory helpers for accounts, transactions and dividends
- Deterministic and failing market data providers
- Service fixtures wired the way LedgerContext wires them
"""

import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from portfolio_ledger.config.settings import reset_settings
from portfolio_ledger.domain.models import (
    Account,
    Currency,
    Dividend,
    PortfolioState,
    Transaction,
    TransactionType,
)
from portfolio_ledger.domain.views import DividendEstimate, StockInfo
from portfolio_ledger.providers import StubMarketDataProvider
from portfolio_ledger.services import AnalysisService, LedgerService, MarketDataService


# =============================================================================
# DATE HELPERS
# =============================================================================


@pytest.fixture
def fixed_today() -> date:
    """Fixed 'today' for deterministic tests."""
    return date(2024, 6, 15)


@pytest.fixture(autouse=True)
def clean_settings():
    """Make sure no test leaks global settings into another."""
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# FACTORY HELPERS (exported for use in tests)
# =============================================================================


def make_account(
    account_id: str = "acc-1",
    cash: str = "0",
    name: Optional[str] = None,
    currency: Currency = Currency.USD,
) -> Account:
    return Account(
        id=account_id,
        name=name or f"Account {account_id}",
        currency=currency,
        cash_balance=Decimal(cash),
    )


def _txn_id() -> str:
    return f"txn-{uuid.uuid4().hex[:8]}"


def buy(
    account_id: str,
    symbol: str,
    quantity: str,
    price: str,
    fee: str = "0",
    day: date = date(2024, 1, 15),
    name: Optional[str] = None,
    sector: Optional[str] = None,
) -> Transaction:
    """BUY with total_amount = price * quantity + fee."""
    qty, px, f = Decimal(quantity), Decimal(price), Decimal(fee)
    return Transaction(
        id=_txn_id(),
        account_id=account_id,
        type=TransactionType.BUY,
        date=day,
        total_amount=qty * px + f,
        fee=f,
        symbol=symbol,
        name=name,
        price=px,
        quantity=qty,
        sector=sector,
    )


def sell(
    account_id: str,
    symbol: str,
    quantity: str,
    price: str,
    fee: str = "0",
    day: date = date(2024, 1, 15),
) -> Transaction:
    """SELL with total_amount = price * quantity - fee."""
    qty, px, f = Decimal(quantity), Decimal(price), Decimal(fee)
    return Transaction(
        id=_txn_id(),
        account_id=account_id,
        type=TransactionType.SELL,
        date=day,
        total_amount=qty * px - f,
        fee=f,
        symbol=symbol,
        price=px,
        quantity=qty,
    )


def deposit(account_id: str, amount: str, day: date = date(2024, 1, 15)) -> Transaction:
    return Transaction(
        id=_txn_id(),
        account_id=account_id,
        type=TransactionType.DEPOSIT,
        date=day,
        total_amount=Decimal(amount),
    )


def withdraw(account_id: str, amount: str, day: date = date(2024, 1, 15)) -> Transaction:
    return Transaction(
        id=_txn_id(),
        account_id=account_id,
        type=TransactionType.WITHDRAW,
        date=day,
        total_amount=Decimal(amount),
    )


def make_dividend(
    dividend_id: str,
    amount: str,
    is_received: bool = False,
    account_id: str = "acc-1",
    symbol: str = "KO",
    pay_date: date = date(2024, 7, 1),
) -> Dividend:
    return Dividend(
        id=dividend_id,
        symbol=symbol,
        account_id=account_id,
        amount=Decimal(amount),
        pay_date=pay_date,
        is_received=is_received,
    )


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


class FixedMarketProvider:
    """Provider with a fixed price/estimate table; counts calls."""

    def __init__(self, prices: dict[str, str], dividends: Optional[dict[str, str]] = None):
        self._prices = {k: Decimal(v) for k, v in prices.items()}
        self._dividends = {k: Decimal(v) for k, v in (dividends or {}).items()}
        self.info_calls = 0

    def get_stock_info(self, symbol: str) -> Optional[StockInfo]:
        self.info_calls += 1
        if symbol not in self._prices:
            return None
        return StockInfo(symbol=symbol, name=symbol, sector="Test", price=self._prices[symbol])

    def estimate_dividend(self, symbol: str) -> Optional[DividendEstimate]:
        if symbol not in self._dividends:
            return None
        return DividendEstimate(symbol=symbol, annual_amount=self._dividends[symbol])


class FailingMarketProvider:
    """Market provider that always raises an exception."""

    def get_stock_info(self, symbol: str) -> Optional[StockInfo]:
        raise ConnectionError("Network unavailable")

    def estimate_dividend(self, symbol: str) -> Optional[DividendEstimate]:
        raise ConnectionError("Network unavailable")


@pytest.fixture
def fixed_provider() -> FixedMarketProvider:
    return FixedMarketProvider(
        prices={"AAPL": "200.00", "MSFT": "400.00"},
        dividends={"MSFT": "3.00", "TSLA": "0"},
    )


@pytest.fixture
def failing_provider() -> FailingMarketProvider:
    return FailingMarketProvider()


@pytest.fixture
def stub_provider() -> StubMarketDataProvider:
    return StubMarketDataProvider()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service() -> LedgerService:
    return LedgerService()


@pytest.fixture
def market_data_service(fixed_provider) -> MarketDataService:
    return MarketDataService(provider=fixed_provider, cache_ttl_seconds=60)


@pytest.fixture
def analysis_service(ledger_service, market_data_service) -> AnalysisService:
    return AnalysisService(
        ledger_service=ledger_service,
        market_data_service=market_data_service,
    )


# =============================================================================
# PRESET DATA FIXTURES
# =============================================================================


@pytest.fixture
def empty_state() -> PortfolioState:
    return PortfolioState.empty()


@pytest.fixture
def state_with_account() -> PortfolioState:
    """One USD account 'acc-1' seeded with $1,000 cash."""
    return PortfolioState(accounts=(make_account("acc-1", cash="1000"),))


@pytest.fixture
def two_account_state() -> PortfolioState:
    """
    Two accounts with positions:
    - acc-1: $1,000 cash, 10 AAPL @ 150, 5 MSFT @ 300
    - acc-2: $500 cash, 4 AAPL @ 160
    Cash balances are seeded directly; the trades are ledger entries only.
    """
    return PortfolioState(
        accounts=(
            make_account("acc-1", cash="1000"),
            make_account("acc-2", cash="500"),
        ),
        transactions=(
            buy("acc-1", "AAPL", "10", "150"),
            buy("acc-1", "MSFT", "5", "300"),
            buy("acc-2", "AAPL", "4", "160"),
        ),
    )
