"""Dividend scheduler: projected and received dividend payments."""

import uuid
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, Optional, Sequence

from dateutil.relativedelta import relativedelta

from portfolio_ledger.domain.models import Dividend
from portfolio_ledger.domain.views import DividendSummary

ZERO = Decimal("0")
QUARTERS_AHEAD = 4
MONTHS_PER_QUARTER = 3


def _default_id(symbol: str, index: int) -> str:
    return f"{symbol}-{uuid.uuid4().hex[:12]}-{index}"


def generate_schedule(
    symbol: str,
    account_id: str,
    per_share_annual_amount: Decimal,
    quantity: Decimal,
    as_of: date,
    id_factory: Optional[Callable[[str, int], str]] = None,
) -> list[Dividend]:
    """
    Project the next four quarterly payments for a holding.

    Pay dates fall 3, 6, 9 and 12 months after as_of; relativedelta clamps to
    the last day of shorter months. Each payment is a quarter of the annual
    per-share amount times quantity. A non-positive estimate (or quantity)
    yields an empty schedule.
    """
    annual = Decimal(str(per_share_annual_amount))
    quantity = Decimal(str(quantity))
    if annual <= ZERO or quantity <= ZERO:
        return []

    make_id = id_factory or _default_id
    amount = annual / QUARTERS_AHEAD * quantity
    return [
        Dividend(
            id=make_id(symbol, i),
            symbol=symbol,
            account_id=account_id,
            amount=amount,
            pay_date=as_of + relativedelta(months=MONTHS_PER_QUARTER * i),
            is_received=False,
        )
        for i in range(1, QUARTERS_AHEAD + 1)
    ]


def toggle_received(dividends: Iterable[Dividend], dividend_id: str) -> tuple[Dividend, ...]:
    """Flip is_received on the matching dividend. Unknown ids change nothing."""
    return tuple(
        replace(d, is_received=not d.is_received) if d.id == dividend_id else d
        for d in dividends
    )


def _select(dividends: Iterable[Dividend], account_id: Optional[str]) -> list[Dividend]:
    if account_id is None:
        return list(dividends)
    return [d for d in dividends if d.account_id == account_id]


def total_received(dividends: Iterable[Dividend], account_id: Optional[str] = None) -> Decimal:
    return sum((d.amount for d in _select(dividends, account_id) if d.is_received), ZERO)


def total_projected(dividends: Iterable[Dividend], account_id: Optional[str] = None) -> Decimal:
    return sum((d.amount for d in _select(dividends, account_id) if not d.is_received), ZERO)


def upcoming(dividends: Iterable[Dividend], as_of: date) -> list[Dividend]:
    """Unreceived payments due on or after as_of, soonest first."""
    pending = [d for d in dividends if not d.is_received and d.pay_date >= as_of]
    return sorted(pending, key=lambda d: (d.pay_date, d.symbol))


def summarize_dividends(
    dividends: Sequence[Dividend],
    as_of: Optional[date] = None,
    account_id: Optional[str] = None,
) -> DividendSummary:
    selected = _select(dividends, account_id)
    next_payment = None
    if as_of is not None:
        pending = upcoming(selected, as_of)
        next_payment = pending[0].pay_date if pending else None
    return DividendSummary(
        total_received=total_received(selected),
        total_projected=total_projected(selected),
        next_payment_date=next_payment,
    )
