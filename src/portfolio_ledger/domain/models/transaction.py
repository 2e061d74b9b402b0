"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from portfolio_ledger.core.exceptions import InvalidTransaction
from portfolio_ledger.core.timezone import parse_date
from portfolio_ledger.domain.models.enums import TransactionType


def _as_decimal(name: str, value) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise InvalidTransaction(f"{name} is not a number: {value!r}") from None
    if not result.is_finite():
        raise InvalidTransaction(f"{name} is not a finite number: {value!r}")
    return result


def _as_date(value) -> date:
    if value is None:
        raise InvalidTransaction("Transaction requires a date")
    try:
        return parse_date(value)
    except (ValueError, OverflowError, TypeError) as e:
        raise InvalidTransaction(f"Invalid transaction date: {value!r}") from e


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


@dataclass(frozen=True)
class Transaction:
    """
    Immutable ledger entry (source of truth).

    Supports: BUY, SELL, DEPOSIT, WITHDRAW.
    - BUY/SELL require symbol, quantity > 0 and price >= 0
    - DEPOSIT/WITHDRAW require total_amount >= 0; trade fields are ignored
    - total_amount is the cash-flow magnitude and already includes the fee
      (BUY: price * quantity + fee, SELL: price * quantity - fee)
    - date accepts a date or an ISO string; blank symbol/name/sector become None
    """

    id: str
    account_id: str
    type: TransactionType
    date: date
    total_amount: Decimal
    fee: Decimal = field(default_factory=lambda: Decimal("0"))
    symbol: Optional[str] = None
    name: Optional[str] = None
    price: Optional[Decimal] = None
    quantity: Optional[Decimal] = None
    sector: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.type, str) and not isinstance(self.type, TransactionType):
            try:
                object.__setattr__(self, "type", TransactionType(self.type))
            except ValueError:
                raise InvalidTransaction(f"Unknown transaction type: {self.type}") from None
        object.__setattr__(self, "date", _as_date(self.date))
        for name in ("total_amount", "fee", "price", "quantity"):
            object.__setattr__(self, name, _as_decimal(name, getattr(self, name)))
        for name in ("symbol", "name", "sector"):
            object.__setattr__(self, name, _blank_to_none(getattr(self, name)))
        self._validate()

    def _validate(self) -> None:
        kind = self.type.value
        if self.total_amount is None:
            raise InvalidTransaction(f"{kind} requires total_amount")
        if self.fee is None or self.fee < 0:
            raise InvalidTransaction("Fee cannot be negative")

        if self.is_trade:
            if self.symbol is None:
                raise InvalidTransaction(f"{kind} requires a symbol")
            if self.quantity is None or self.quantity <= 0:
                raise InvalidTransaction(f"{kind} requires quantity > 0")
            if self.price is None or self.price < 0:
                raise InvalidTransaction(f"{kind} requires price >= 0")
        elif self.total_amount < 0:
            raise InvalidTransaction(f"{kind} requires total_amount >= 0")

    @property
    def is_trade(self) -> bool:
        """Return True if this is a BUY or SELL transaction."""
        return self.type in (TransactionType.BUY, TransactionType.SELL)

    @property
    def is_cash_movement(self) -> bool:
        """Return True if this is a DEPOSIT or WITHDRAW transaction."""
        return self.type in (TransactionType.DEPOSIT, TransactionType.WITHDRAW)

    @property
    def net_cash_impact(self) -> Decimal:
        """
        Signed cash effect of this transaction.

        Positive = cash added, Negative = cash removed.
        """
        if self.type in (TransactionType.DEPOSIT, TransactionType.SELL):
            return self.total_amount
        return -self.total_amount
