"""Ledger service: state transitions over a PortfolioState."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional, Union

from portfolio_ledger.core.timezone import parse_date, today_eastern
from portfolio_ledger.core.exceptions import InvalidTransaction, ValidationError
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
from portfolio_ledger.services.balance_updater import apply_transaction
from portfolio_ledger.services.dividend_scheduler import generate_schedule, toggle_received
from portfolio_ledger.services.position_aggregator import compute_holdings

logger = logging.getLogger(__name__)


@dataclass
class TransactionCreate:
    """Trade-entry input; fee arithmetic happens when it is built."""

    account_id: str
    type: TransactionType
    date: Optional[Union[date, str]] = None
    symbol: Optional[str] = None
    name: Optional[str] = None
    sector: Optional[str] = None
    quantity: Optional[Decimal] = None
    price: Optional[Decimal] = None
    amount: Optional[Decimal] = None  # DEPOSIT/WITHDRAW only
    fee: Decimal = field(default_factory=lambda: Decimal("0"))
    id: Optional[str] = None  # Auto-generated if omitted


def _normalize_symbol(symbol: Optional[str]) -> Optional[str]:
    """Strip and uppercase; empty becomes None."""
    if symbol is None:
        return None
    s = symbol.strip().upper()
    return s or None


def _to_decimal(name: str, value) -> Decimal:
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise InvalidTransaction(f"{name} is not a number: {value!r}") from None
    if not result.is_finite():
        raise InvalidTransaction(f"{name} is not a finite number: {value!r}")
    return result


class LedgerService:
    """
    Service for evolving portfolio state.

    Every method takes a PortfolioState and returns a new one (or a derived
    value); nothing is held between calls. The ledger is append-only.
    """

    def __init__(
        self,
        enforce_cash_balance: bool = False,
        replay_order: ReplayOrder = ReplayOrder.INSERTION,
        default_currency: Currency = Currency.USD,
    ):
        self._enforce_cash_balance = enforce_cash_balance
        self._replay_order = ReplayOrder(replay_order)
        self._default_currency = Currency(default_currency)

    @property
    def replay_order(self) -> ReplayOrder:
        return self._replay_order

    def create_account(
        self,
        state: PortfolioState,
        name: str,
        currency: Optional[Union[Currency, str]] = None,
        initial_balance: Decimal = Decimal("0"),
        account_id: Optional[str] = None,
    ) -> PortfolioState:
        """
        Add a new account to the portfolio.

        Args:
            name: Display name (must not be blank)
            currency: Account currency, defaults to the configured one
            initial_balance: Seeded cash balance
        """
        if not name or not name.strip():
            raise ValidationError("Account name cannot be empty")

        account = Account(
            id=account_id or str(uuid.uuid4()),
            name=name.strip(),
            currency=currency or self._default_currency,
            cash_balance=initial_balance,
        )
        if state.has_account(account.id):
            raise ValidationError(f"Account with id '{account.id}' already exists")

        logger.info("Created account %s (%s)", account.id, account.name)
        return state.with_accounts(state.accounts + (account,))

    def build_transaction(self, data: TransactionCreate) -> Transaction:
        """
        Turn trade-entry input into a ledger transaction.

        total_amount = price * quantity + fee for BUY, price * quantity - fee
        for SELL, and the entered amount for DEPOSIT/WITHDRAW.
        """
        txn_type = TransactionType(data.type)
        fee = _to_decimal("fee", data.fee or 0)
        symbol = _normalize_symbol(data.symbol)

        if txn_type in (TransactionType.BUY, TransactionType.SELL):
            if data.quantity is None or data.price is None:
                raise InvalidTransaction(f"{txn_type.value} requires quantity and price")
            quantity = _to_decimal("quantity", data.quantity)
            price = _to_decimal("price", data.price)
            gross = price * quantity
            total = gross + fee if txn_type == TransactionType.BUY else gross - fee
            return Transaction(
                id=data.id or str(uuid.uuid4()),
                account_id=data.account_id,
                type=txn_type,
                date=self._resolve_date(data.date),
                total_amount=total,
                fee=fee,
                symbol=symbol,
                name=data.name or symbol,
                price=price,
                quantity=quantity,
                sector=data.sector,
            )

        amount = None if data.amount is None else _to_decimal("amount", data.amount)
        if amount is None or amount <= 0:
            raise InvalidTransaction(f"{txn_type.value} requires amount > 0")
        return Transaction(
            id=data.id or str(uuid.uuid4()),
            account_id=data.account_id,
            type=txn_type,
            date=self._resolve_date(data.date),
            total_amount=amount,
            fee=fee,
        )

    def record_transaction(self, state: PortfolioState, txn: Transaction) -> PortfolioState:
        """
        Append a transaction and apply its cash effect.

        Raises UnknownAccount for an account not in the state, and
        InsufficientFunds when overdraft is disabled. Either way the input
        state is left as it was.
        """
        account = state.get_account(txn.account_id)
        updated = apply_transaction(account, txn, self._enforce_cash_balance)

        accounts = tuple(updated if a.id == account.id else a for a in state.accounts)
        logger.debug(
            "Recorded %s %s on %s: cash %s -> %s",
            txn.type.value,
            txn.id,
            account.id,
            account.cash_balance,
            updated.cash_balance,
        )
        return PortfolioState(accounts, state.transactions + (txn,), state.dividends)

    def add_transaction(self, state: PortfolioState, data: TransactionCreate) -> PortfolioState:
        """Build a transaction from trade-entry input and record it."""
        return self.record_transaction(state, self.build_transaction(data))

    def get_holdings(self, state: PortfolioState, account_id: str) -> list[Holding]:
        """Current holdings for an account (UnknownAccount if absent)."""
        state.get_account(account_id)
        return compute_holdings(account_id, state.transactions, order=self._replay_order)

    def schedule_dividends(
        self,
        state: PortfolioState,
        account_id: str,
        symbol: str,
        per_share_annual_amount: Decimal,
        as_of: Optional[date] = None,
    ) -> PortfolioState:
        """
        Generate four quarterly payments from the holding's current quantity.

        Returns the state unchanged when the account does not hold the symbol
        or the estimate is not positive.
        """
        symbol = _normalize_symbol(symbol) or ""
        holding = next(
            (h for h in self.get_holdings(state, account_id) if h.symbol == symbol),
            None,
        )
        if holding is None:
            logger.info("No %s position in %s; no dividends scheduled", symbol, account_id)
            return state

        schedule = generate_schedule(
            symbol=symbol,
            account_id=account_id,
            per_share_annual_amount=per_share_annual_amount,
            quantity=holding.quantity,
            as_of=as_of or today_eastern(),
        )
        if not schedule:
            return state
        return self.add_dividends(state, schedule)

    def add_dividends(self, state: PortfolioState, dividends: Iterable[Dividend]) -> PortfolioState:
        new = tuple(dividends)
        for dividend in new:
            state.get_account(dividend.account_id)
        return state.with_dividends(state.dividends + new)

    def toggle_dividend(self, state: PortfolioState, dividend_id: str) -> PortfolioState:
        """Flip received/projected on one dividend; unknown ids are a no-op."""
        return state.with_dividends(toggle_received(state.dividends, dividend_id))

    def reset(self) -> PortfolioState:
        """Drop every account, transaction and dividend."""
        logger.info("Portfolio reset")
        return PortfolioState.empty()

    @staticmethod
    def _resolve_date(value: Optional[Union[date, str]]) -> date:
        if value is None:
            return today_eastern()
        try:
            return parse_date(value)
        except (ValueError, OverflowError) as e:
            raise InvalidTransaction(f"Invalid transaction date: {value!r}") from e
