"""Position aggregator: replays an account's ledger into holdings."""

from dataclasses import replace
from decimal import Decimal
from typing import Iterable, Mapping, MutableMapping, Optional, Sequence

from portfolio_ledger.domain.models import ReplayOrder, Transaction, TransactionType
from portfolio_ledger.domain.views import Holding

ZERO = Decimal("0")


def order_ledger(
    transactions: Iterable[Transaction],
    order: ReplayOrder = ReplayOrder.INSERTION,
) -> list[Transaction]:
    """
    Return transactions in replay order.

    INSERTION keeps the stored order. DATE sorts by trade date; sorted() is
    stable, so insertion order breaks ties between same-day entries.
    """
    ordered = list(transactions)
    if ReplayOrder(order) == ReplayOrder.DATE:
        ordered.sort(key=lambda t: t.date)
    return ordered


def fold_transaction(book: MutableMapping[str, Holding], txn: Transaction) -> None:
    """
    Fold one transaction into a running symbol -> Holding book.

    The book keeps non-positive quantities so that the running quantity is
    always the signed sum of BUY - SELL; callers filter those out when
    reading. Cash movements are skipped.
    """
    if not txn.is_trade:
        return

    current = book.get(txn.symbol)
    if current is None:
        current = Holding(
            symbol=txn.symbol,
            name=txn.name or txn.symbol,
            quantity=ZERO,
            average_price=ZERO,
            current_price=txn.price,
            sector=txn.sector,
        )
    elif txn.sector:
        current = replace(current, sector=txn.sector)

    if txn.type == TransactionType.BUY:
        new_quantity = current.quantity + txn.quantity
        if current.quantity <= ZERO:
            # Position was flat (or short): cost basis starts over.
            average_price = txn.price
        else:
            total_cost = current.quantity * current.average_price + txn.quantity * txn.price
            average_price = total_cost / new_quantity
        current = replace(
            current,
            quantity=new_quantity,
            average_price=average_price,
            current_price=txn.price,
        )
    elif txn.type == TransactionType.SELL:
        current = replace(current, quantity=current.quantity - txn.quantity)

    book[txn.symbol] = current


def compute_holdings(
    account_id: str,
    transactions: Iterable[Transaction],
    order: ReplayOrder = ReplayOrder.INSERTION,
    prices: Optional[Mapping[str, Decimal]] = None,
) -> list[Holding]:
    """
    Replay an account's ledger into its current holdings.

    Weighted-average cost basis (fee-exclusive) is recomputed on each BUY and
    left untouched by SELLs. The mark price is the latest BUY price unless
    `prices` overrides it. Symbols whose quantity is not positive are
    omitted. Output is sorted by symbol.
    """
    ledger = order_ledger((t for t in transactions if t.account_id == account_id), order)

    book: dict[str, Holding] = {}
    for txn in ledger:
        fold_transaction(book, txn)

    holdings = [h for _, h in sorted(book.items()) if h.quantity > ZERO]
    if prices:
        holdings = apply_prices(holdings, prices)
    return holdings


def apply_prices(
    holdings: Sequence[Holding],
    prices: Mapping[str, Decimal],
) -> list[Holding]:
    """Mark holdings to externally resolved prices; symbols without a price keep theirs."""
    marked = []
    for holding in holdings:
        price = prices.get(holding.symbol)
        if price is None:
            marked.append(holding)
        else:
            marked.append(replace(holding, current_price=Decimal(str(price))))
    return marked
