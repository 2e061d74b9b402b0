"""Portfolio state snapshot."""

from dataclasses import dataclass
from typing import Iterable

from portfolio_ledger.core.exceptions import UnknownAccount
from portfolio_ledger.domain.models.account import Account
from portfolio_ledger.domain.models.dividend import Dividend
from portfolio_ledger.domain.models.transaction import Transaction


@dataclass(frozen=True)
class PortfolioState:
    """
    Everything the engine knows, as one immutable value.

    Operations never edit a state in place; they return a new one. Holdings
    are not stored here because they are always derived from transactions.
    """

    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    dividends: tuple[Dividend, ...] = ()

    def __post_init__(self) -> None:
        for name in ("accounts", "transactions", "dividends"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @classmethod
    def empty(cls) -> "PortfolioState":
        return cls()

    def has_account(self, account_id: str) -> bool:
        return any(a.id == account_id for a in self.accounts)

    def get_account(self, account_id: str) -> Account:
        """Get account by ID."""
        for account in self.accounts:
            if account.id == account_id:
                return account
        raise UnknownAccount(account_id)

    def transactions_for(self, account_id: str) -> list[Transaction]:
        return [t for t in self.transactions if t.account_id == account_id]

    def dividends_for(self, account_id: str) -> list[Dividend]:
        return [d for d in self.dividends if d.account_id == account_id]

    def with_accounts(self, accounts: Iterable[Account]) -> "PortfolioState":
        return PortfolioState(tuple(accounts), self.transactions, self.dividends)

    def with_dividends(self, dividends: Iterable[Dividend]) -> "PortfolioState":
        return PortfolioState(self.accounts, self.transactions, tuple(dividends))
