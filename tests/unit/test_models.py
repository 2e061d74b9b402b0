"""
Unit tests for the ledger entry model.

Tests cover:
- Construction-time validation of BUY/SELL and DEPOSIT/WITHDRAW entries
- Enum, number, date and blank-string coercion
- Signed cash impact
- PortfolioState lookups
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime
from decimal import Decimal

import pytest

from portfolio_ledger.core.exceptions import InvalidTransaction, UnknownAccount, ValidationError
from portfolio_ledger.domain.models import (
    Account,
    Currency,
    Dividend,
    PortfolioState,
    Transaction,
    TransactionType,
)

from tests.conftest import buy, deposit, make_account, sell, withdraw


def _trade(**overrides) -> Transaction:
    fields = dict(
        id="t1",
        account_id="acc-1",
        type=TransactionType.BUY,
        date=date(2024, 1, 15),
        total_amount=Decimal("100"),
        symbol="AAPL",
        price=Decimal("10"),
        quantity=Decimal("10"),
    )
    fields.update(overrides)
    return Transaction(**fields)


class TestTradeValidation:
    """BUY/SELL must carry symbol, quantity > 0 and price >= 0."""

    @pytest.mark.parametrize("txn_type", [TransactionType.BUY, TransactionType.SELL])
    def test_valid_trade(self, txn_type):
        txn = _trade(type=txn_type)
        assert txn.is_trade
        assert not txn.is_cash_movement

    @pytest.mark.parametrize("symbol", [None, "", "   "])
    def test_missing_symbol_rejected(self, symbol):
        with pytest.raises(InvalidTransaction, match="symbol"):
            _trade(symbol=symbol)

    @pytest.mark.parametrize("quantity", [None, Decimal("0"), Decimal("-1")])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(InvalidTransaction, match="quantity"):
            _trade(type=TransactionType.SELL, quantity=quantity)

    def test_negative_price_rejected(self):
        with pytest.raises(InvalidTransaction, match="price"):
            _trade(price=Decimal("-0.01"))

    def test_zero_price_allowed(self):
        """Gifted or spun-off shares can be recorded at zero cost."""
        txn = _trade(price=Decimal("0"), total_amount=Decimal("0"))
        assert txn.price == Decimal("0")

    def test_negative_fee_rejected(self):
        with pytest.raises(InvalidTransaction, match="Fee"):
            _trade(fee=Decimal("-1"))

    def test_total_amount_is_not_recomputed(self):
        """The supplied total_amount is trusted even if it disagrees with price * qty."""
        txn = _trade(total_amount=Decimal("123.45"), fee=Decimal("5"))
        assert txn.total_amount == Decimal("123.45")

    def test_invalid_error_code(self):
        with pytest.raises(InvalidTransaction) as exc_info:
            _trade(symbol=None)
        assert exc_info.value.code == "INVALID_TRANSACTION"
        assert isinstance(exc_info.value, ValidationError)


class TestCashMovementValidation:
    """DEPOSIT/WITHDRAW only need a non-negative total_amount."""

    def test_deposit_ignores_trade_fields(self):
        txn = Transaction(
            id="t1",
            account_id="acc-1",
            type=TransactionType.DEPOSIT,
            date=date(2024, 1, 15),
            total_amount=Decimal("500"),
        )
        assert txn.is_cash_movement
        assert txn.symbol is None

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidTransaction, match="total_amount"):
            Transaction(
                id="t1",
                account_id="acc-1",
                type=TransactionType.WITHDRAW,
                date=date(2024, 1, 15),
                total_amount=Decimal("-5"),
            )

    def test_non_numeric_amount_rejected(self):
        with pytest.raises(InvalidTransaction, match="not a number"):
            Transaction(
                id="t1",
                account_id="acc-1",
                type="DEPOSIT",
                date=date(2024, 1, 15),
                total_amount="abc",
            )


class TestCoercion:

    def test_type_from_string(self):
        txn = _trade(type="SELL")
        assert txn.type is TransactionType.SELL

    def test_unknown_type_rejected(self):
        with pytest.raises(InvalidTransaction, match="Unknown transaction type"):
            _trade(type="DIVIDEND")

    def test_numbers_become_decimal(self):
        txn = _trade(price=12.5, quantity=2, total_amount="25")
        assert txn.price == Decimal("12.5")
        assert isinstance(txn.quantity, Decimal)
        assert txn.total_amount == Decimal("25")

    def test_account_currency_from_string(self):
        account = Account(id="a", name="Main", currency="HKD", cash_balance=10)
        assert account.currency is Currency.HKD
        assert account.cash_balance == Decimal("10")

    def test_unsupported_currency_rejected(self):
        with pytest.raises(ValidationError, match="currency"):
            Account(id="a", name="Main", currency="CHF")

    @pytest.mark.parametrize("balance", ["abc", "NaN", "Infinity"])
    def test_bad_cash_balance_rejected(self, balance):
        with pytest.raises(ValidationError, match="Cash balance"):
            Account(id="a", name="Main", cash_balance=balance)


class TestNonFiniteNumbers:
    """NaN and infinities are malformed input, not numbers."""

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", Decimal("NaN"), float("inf")])
    def test_quantity_rejected(self, value):
        with pytest.raises(InvalidTransaction, match="quantity is not a finite number"):
            _trade(quantity=value)

    @pytest.mark.parametrize("field_name", ["price", "fee", "total_amount"])
    def test_other_amounts_rejected(self, field_name):
        with pytest.raises(InvalidTransaction, match=field_name):
            _trade(**{field_name: "NaN"})


class TestDateCoercion:

    def test_iso_string_becomes_date(self):
        txn = _trade(date="2024-02-01")
        assert txn.date == date(2024, 2, 1)
        assert type(txn.date) is date

    def test_datetime_drops_time(self):
        txn = _trade(date=datetime(2024, 2, 1, 15, 30))
        assert type(txn.date) is date
        assert txn.date == date(2024, 2, 1)

    def test_string_and_date_entries_are_equal(self):
        assert _trade(date="2024-02-01") == _trade(date=date(2024, 2, 1))

    def test_missing_date_rejected(self):
        with pytest.raises(InvalidTransaction, match="date"):
            _trade(date=None)

    @pytest.mark.parametrize("value", ["not a date", "2024-02-30", 12])
    def test_unparseable_date_rejected(self, value):
        with pytest.raises(InvalidTransaction, match="date"):
            _trade(date=value)

    def test_dividend_pay_date_from_string(self):
        dividend = Dividend(id="d1", symbol="KO", account_id="acc-1", amount="1.5", pay_date="2024-07-01")
        assert dividend.pay_date == date(2024, 7, 1)
        assert dividend.amount == Decimal("1.5")

    @pytest.mark.parametrize("pay_date", [None, "someday"])
    def test_dividend_bad_pay_date_rejected(self, pay_date):
        with pytest.raises(ValidationError, match="pay date"):
            Dividend(id="d1", symbol="KO", account_id="acc-1", amount="1", pay_date=pay_date)

    @pytest.mark.parametrize("amount", ["abc", "NaN"])
    def test_dividend_bad_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match="amount"):
            Dividend(id="d1", symbol="KO", account_id="acc-1", amount=amount, pay_date=date(2024, 7, 1))


class TestBlankStrings:
    """Blank optional text fields are stored as None."""

    def test_blank_name_and_sector(self):
        txn = _trade(name="", sector="  ")
        assert txn.name is None
        assert txn.sector is None

    def test_blank_symbol_on_cash_movement(self):
        txn = Transaction(
            id="t1",
            account_id="acc-1",
            type=TransactionType.DEPOSIT,
            date=date(2024, 1, 15),
            total_amount=Decimal("10"),
            symbol="",
        )
        assert txn.symbol is None

    def test_non_blank_kept(self):
        txn = _trade(name="Apple Inc.", sector="Technology")
        assert txn.name == "Apple Inc."
        assert txn.sector == "Technology"


class TestImmutability:

    def test_transaction_is_frozen(self):
        txn = deposit("acc-1", "100")
        with pytest.raises(FrozenInstanceError):
            txn.total_amount = Decimal("1")

    def test_account_is_frozen(self):
        account = make_account()
        with pytest.raises(FrozenInstanceError):
            account.cash_balance = Decimal("1")


class TestNetCashImpact:

    def test_signs(self):
        assert deposit("a", "500").net_cash_impact == Decimal("500")
        assert withdraw("a", "200").net_cash_impact == Decimal("-200")
        assert buy("a", "AAPL", "2", "150", fee="1").net_cash_impact == Decimal("-301")
        assert sell("a", "AAPL", "1", "100", fee="1").net_cash_impact == Decimal("99")


class TestPortfolioState:

    def test_empty_state(self):
        state = PortfolioState.empty()
        assert state.accounts == ()
        assert state.transactions == ()
        assert state.dividends == ()

    def test_lists_are_frozen_to_tuples(self):
        state = PortfolioState(accounts=[make_account()])
        assert isinstance(state.accounts, tuple)

    def test_get_account(self):
        state = PortfolioState(accounts=(make_account("a"), make_account("b")))
        assert state.get_account("b").id == "b"
        assert state.has_account("a")
        assert not state.has_account("c")

    def test_get_unknown_account(self):
        with pytest.raises(UnknownAccount) as exc_info:
            PortfolioState.empty().get_account("missing")
        assert exc_info.value.code == "UNKNOWN_ACCOUNT"

    def test_transactions_for_keeps_order(self):
        t1, t2, t3 = deposit("a", "1"), deposit("b", "2"), deposit("a", "3")
        state = PortfolioState(transactions=(t1, t2, t3))
        assert state.transactions_for("a") == [t1, t3]
