"""View models for derived portfolio and collaborator outputs."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Holding:
    """
    Derived position for one symbol in one account.

    Never stored; always recomputed by replaying the account's ledger.
    """

    symbol: str
    name: str
    quantity: Decimal
    average_price: Decimal
    current_price: Decimal
    sector: Optional[str] = None

    @property
    def market_value(self) -> Decimal:
        return self.quantity * self.current_price

    @property
    def cost_basis(self) -> Decimal:
        return self.quantity * self.average_price

    @property
    def unrealized_pnl(self) -> Decimal:
        return self.market_value - self.cost_basis


@dataclass
class AllocationItem:
    """Single item in allocation breakdown."""

    symbol: str
    market_value: Decimal
    percentage: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class AllocationView:
    """Portfolio allocation breakdown."""

    items: list[AllocationItem] = field(default_factory=list)
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class PortfolioSummary:
    """System-wide figures across all accounts."""

    total_worth: Decimal
    total_cash: Decimal
    total_invested: Decimal
    total_deposits: Decimal
    total_withdrawals: Decimal
    net_profit: Decimal
    net_profit_percent: Decimal
    allocation: AllocationView = field(default_factory=AllocationView)


@dataclass
class DividendSummary:
    """Received vs projected dividend totals."""

    total_received: Decimal = field(default_factory=lambda: Decimal("0"))
    total_projected: Decimal = field(default_factory=lambda: Decimal("0"))
    next_payment_date: Optional[date] = None


@dataclass(frozen=True)
class StockInfo:
    """Metadata and price returned by a market data lookup."""

    symbol: str
    name: str
    sector: str
    price: Decimal
    dividend_yield: Optional[Decimal] = None


@dataclass(frozen=True)
class DividendEstimate:
    """Per-share annual dividend estimate returned by a lookup."""

    symbol: str
    annual_amount: Decimal
    frequency: str = "Quarterly"
