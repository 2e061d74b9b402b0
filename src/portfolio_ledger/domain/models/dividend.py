"""Dividend domain model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

from portfolio_ledger.core.exceptions import ValidationError
from portfolio_ledger.core.timezone import parse_date


@dataclass(frozen=True)
class Dividend:
    """A projected or received dividend payment for one holding."""

    id: str
    symbol: str
    account_id: str
    amount: Decimal
    pay_date: date
    is_received: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except InvalidOperation:
                raise ValidationError(f"Dividend amount is not a number: {self.amount!r}") from None
        if not self.amount.is_finite():
            raise ValidationError(f"Dividend amount is not a finite number: {self.amount!r}")

        if self.pay_date is None:
            raise ValidationError("Dividend requires a pay date")
        try:
            object.__setattr__(self, "pay_date", parse_date(self.pay_date))
        except (ValueError, OverflowError, TypeError) as e:
            raise ValidationError(f"Invalid dividend pay date: {self.pay_date!r}") from e
