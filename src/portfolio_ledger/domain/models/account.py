"""Account domain model."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from portfolio_ledger.core.exceptions import ValidationError
from portfolio_ledger.domain.models.enums import Currency


@dataclass(frozen=True)
class Account:
    """
    Cash-holding container that owns a ledger of transactions.

    cash_balance is only ever changed by the balance updater, which returns
    a new Account instead of editing this one.
    """

    id: str
    name: str
    currency: Currency = Currency.USD
    cash_balance: Decimal = field(default_factory=lambda: Decimal("0"))

    def __post_init__(self) -> None:
        if isinstance(self.currency, str) and not isinstance(self.currency, Currency):
            try:
                object.__setattr__(self, "currency", Currency(self.currency))
            except ValueError:
                raise ValidationError(f"Unsupported currency: {self.currency}") from None
        if not isinstance(self.cash_balance, Decimal):
            try:
                object.__setattr__(self, "cash_balance", Decimal(str(self.cash_balance)))
            except InvalidOperation:
                raise ValidationError(f"Cash balance is not a number: {self.cash_balance!r}") from None
        if not self.cash_balance.is_finite():
            raise ValidationError(f"Cash balance is not a finite number: {self.cash_balance!r}")
