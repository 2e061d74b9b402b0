"""Balance updater: applies transactions to account cash."""

from dataclasses import replace
from decimal import Decimal
from typing import Iterable

from portfolio_ledger.core.exceptions import InsufficientFunds, UnknownAccount
from portfolio_ledger.domain.models import Account, Transaction


def apply_transaction(
    account: Account,
    txn: Transaction,
    enforce_cash_balance: bool = False,
) -> Account:
    """
    Return a copy of the account with the transaction's cash effect applied.

    DEPOSIT and SELL add total_amount, WITHDRAW and BUY subtract it. Balances
    may go negative unless enforce_cash_balance is set, in which case a debit
    that would overdraw raises InsufficientFunds.
    """
    if txn.account_id != account.id:
        raise UnknownAccount(txn.account_id)

    impact = txn.net_cash_impact
    new_balance = account.cash_balance + impact

    if enforce_cash_balance and impact < 0 and new_balance < Decimal("0"):
        raise InsufficientFunds(
            account.id,
            requested=str(-impact),
            available=str(account.cash_balance),
        )

    return replace(account, cash_balance=new_balance)


def replay_balance(
    account: Account,
    transactions: Iterable[Transaction],
    enforce_cash_balance: bool = False,
) -> Account:
    """Apply every transaction belonging to the account, in order."""
    for txn in transactions:
        if txn.account_id == account.id:
            account = apply_transaction(account, txn, enforce_cash_balance)
    return account
