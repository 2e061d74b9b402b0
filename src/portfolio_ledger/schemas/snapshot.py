"""Pydantic schemas for the portable state snapshot."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portfolio_ledger.domain.models import (
    Account,
    Currency,
    Dividend,
    PortfolioState,
    Transaction,
    TransactionType,
)

SNAPSHOT_VERSION = 1


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class AccountSchema(_CamelModel):
    """Serialized account: {id, name, currency, cashBalance}."""

    id: str
    name: str
    currency: Currency = Currency.USD
    cash_balance: Decimal = Decimal("0")

    @classmethod
    def from_domain(cls, account: Account) -> "AccountSchema":
        return cls(
            id=account.id,
            name=account.name,
            currency=account.currency,
            cash_balance=account.cash_balance,
        )

    def to_domain(self) -> Account:
        return Account(
            id=self.id,
            name=self.name,
            currency=self.currency,
            cash_balance=self.cash_balance,
        )


class TransactionSchema(_CamelModel):
    """Serialized ledger entry; trade fields are omitted for cash movements."""

    id: str
    account_id: str
    type: TransactionType
    symbol: Optional[str] = None
    name: Optional[str] = None
    sector: Optional[str] = None
    price: Optional[Decimal] = None
    quantity: Optional[Decimal] = None
    fee: Decimal = Decimal("0")
    date: dt.date
    total_amount: Decimal

    @classmethod
    def from_domain(cls, txn: Transaction) -> "TransactionSchema":
        return cls(
            id=txn.id,
            account_id=txn.account_id,
            type=txn.type,
            symbol=txn.symbol,
            name=txn.name,
            sector=txn.sector,
            price=txn.price,
            quantity=txn.quantity,
            fee=txn.fee,
            date=txn.date,
            total_amount=txn.total_amount,
        )

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            account_id=self.account_id,
            type=self.type,
            date=self.date,
            total_amount=self.total_amount,
            fee=self.fee,
            symbol=self.symbol,
            name=self.name,
            price=self.price,
            quantity=self.quantity,
            sector=self.sector,
        )


class DividendSchema(_CamelModel):
    """Serialized dividend: {id, symbol, amount, payDate, isReceived, accountId}."""

    id: str
    symbol: str
    amount: Decimal
    pay_date: dt.date
    is_received: bool = False
    account_id: str

    @classmethod
    def from_domain(cls, dividend: Dividend) -> "DividendSchema":
        return cls(
            id=dividend.id,
            symbol=dividend.symbol,
            amount=dividend.amount,
            pay_date=dividend.pay_date,
            is_received=dividend.is_received,
            account_id=dividend.account_id,
        )

    def to_domain(self) -> Dividend:
        return Dividend(
            id=self.id,
            symbol=self.symbol,
            account_id=self.account_id,
            amount=self.amount,
            pay_date=self.pay_date,
            is_received=self.is_received,
        )


class SnapshotSchema(_CamelModel):
    """Self-describing backup of the full engine input state."""

    version: int = SNAPSHOT_VERSION
    export_date: Optional[dt.datetime] = None
    accounts: list[AccountSchema] = Field(default_factory=list)
    transactions: list[TransactionSchema] = Field(default_factory=list)
    dividends: list[DividendSchema] = Field(default_factory=list)

    @classmethod
    def from_state(
        cls,
        state: PortfolioState,
        export_date: Optional[dt.datetime] = None,
    ) -> "SnapshotSchema":
        return cls(
            export_date=export_date,
            accounts=[AccountSchema.from_domain(a) for a in state.accounts],
            transactions=[TransactionSchema.from_domain(t) for t in state.transactions],
            dividends=[DividendSchema.from_domain(d) for d in state.dividends],
        )

    def to_state(self) -> PortfolioState:
        return PortfolioState(
            accounts=tuple(a.to_domain() for a in self.accounts),
            transactions=tuple(t.to_domain() for t in self.transactions),
            dividends=tuple(d.to_domain() for d in self.dividends),
        )
