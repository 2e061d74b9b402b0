"""Portfolio aggregator: combines all accounts into system-wide figures."""

from collections import defaultdict
from decimal import Decimal
from typing import Mapping, Optional, Sequence

from portfolio_ledger.domain.models import (
    Account,
    ReplayOrder,
    Transaction,
    TransactionType,
)
from portfolio_ledger.domain.views import (
    AllocationItem,
    AllocationView,
    PortfolioSummary,
)
from portfolio_ledger.services.position_aggregator import compute_holdings

ZERO = Decimal("0")
CENT = Decimal("0.01")
CASH_BUCKET = "Cash"

Prices = Optional[Mapping[str, Decimal]]


def total_cash(accounts: Sequence[Account]) -> Decimal:
    """Sum of cash balances. Currencies are added without conversion."""
    return sum((a.cash_balance for a in accounts), ZERO)


def account_worth(
    account: Account,
    transactions: Sequence[Transaction],
    prices: Prices = None,
    order: ReplayOrder = ReplayOrder.INSERTION,
) -> Decimal:
    """Cash plus market value of the account's holdings."""
    holdings = compute_holdings(account.id, transactions, order=order, prices=prices)
    return account.cash_balance + sum((h.market_value for h in holdings), ZERO)


def total_worth(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    prices: Prices = None,
    order: ReplayOrder = ReplayOrder.INSERTION,
) -> Decimal:
    """Σ over accounts of cash + Σ(quantity × current_price)."""
    return sum(
        (account_worth(a, transactions, prices=prices, order=order) for a in accounts),
        ZERO,
    )


def total_invested(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    prices: Prices = None,
    order: ReplayOrder = ReplayOrder.INSERTION,
) -> Decimal:
    """Market value of holdings: total worth minus total cash."""
    return total_worth(accounts, transactions, prices, order) - total_cash(accounts)


def allocation_breakdown(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    prices: Prices = None,
    order: ReplayOrder = ReplayOrder.INSERTION,
) -> AllocationView:
    """
    Market value per symbol, merged across accounts.

    Items are sorted by market value descending (symbol breaks ties) and
    carry their percentage of the total holdings value.
    """
    merged: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for account in accounts:
        for holding in compute_holdings(account.id, transactions, order=order, prices=prices):
            merged[holding.symbol] += holding.market_value

    items = [AllocationItem(symbol=s, market_value=v) for s, v in merged.items()]
    items.sort(key=lambda x: (-x.market_value, x.symbol))

    total_value = sum((i.market_value for i in items), ZERO)
    if total_value != ZERO:
        for item in items:
            item.percentage = (item.market_value / total_value * 100).quantize(CENT)

    return AllocationView(items=items, total_value=total_value)


def allocation_chart(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    top_n: int = 5,
    prices: Prices = None,
    order: ReplayOrder = ReplayOrder.INSERTION,
) -> list[AllocationItem]:
    """
    Dashboard slices: the top N symbols by value plus a Cash bucket.

    The Cash bucket is only added when total cash is positive. Percentages
    are relative to the sum of the returned slices.
    """
    breakdown = allocation_breakdown(accounts, transactions, prices, order)
    slices = [AllocationItem(i.symbol, i.market_value) for i in breakdown.items[:top_n]]

    cash = total_cash(accounts)
    if cash > ZERO:
        slices.append(AllocationItem(CASH_BUCKET, cash))

    total = sum((s.market_value for s in slices), ZERO)
    if total != ZERO:
        for s in slices:
            s.percentage = (s.market_value / total * 100).quantize(CENT)
    return slices


def _sum_of_type(transactions: Sequence[Transaction], txn_type: TransactionType) -> Decimal:
    return sum((t.total_amount for t in transactions if t.type == txn_type), ZERO)


def total_deposits(transactions: Sequence[Transaction]) -> Decimal:
    return _sum_of_type(transactions, TransactionType.DEPOSIT)


def total_withdrawals(transactions: Sequence[Transaction]) -> Decimal:
    return _sum_of_type(transactions, TransactionType.WITHDRAW)


def net_funding(transactions: Sequence[Transaction]) -> Decimal:
    """Σ deposits − Σ withdrawals."""
    return total_deposits(transactions) - total_withdrawals(transactions)


def profit_loss(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    prices: Prices = None,
    order: ReplayOrder = ReplayOrder.INSERTION,
) -> tuple[Decimal, Decimal]:
    """
    Net profit and its percentage of net funding.

    Percentage is 0 when net funding is 0.
    """
    funding = net_funding(transactions)
    profit = total_worth(accounts, transactions, prices, order) - funding
    if funding == ZERO:
        return profit, ZERO
    return profit, (profit / funding * 100).quantize(CENT)


def summarize(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    prices: Prices = None,
    order: ReplayOrder = ReplayOrder.INSERTION,
) -> PortfolioSummary:
    """Bundle every system-wide figure into one view."""
    worth = total_worth(accounts, transactions, prices, order)
    cash = total_cash(accounts)
    profit, percent = profit_loss(accounts, transactions, prices, order)
    return PortfolioSummary(
        total_worth=worth,
        total_cash=cash,
        total_invested=worth - cash,
        total_deposits=total_deposits(transactions),
        total_withdrawals=total_withdrawals(transactions),
        net_profit=profit,
        net_profit_percent=percent,
        allocation=allocation_breakdown(accounts, transactions, prices, order),
    )
