from decimal import Decimal

import pytest

from sms_txn_parser import CategoryId, TransactionType
from sms_txn_parser.shortcut import (
    STATUS_ERROR,
    STATUS_SUCCESS,
    Account,
    ShortcutParams,
    build_transaction_url,
    process_shortcut,
    resolve_account,
)


class TestBuildTransactionUrl:
    def test_builds_add_link(self):
        url = build_transaction_url(450, "SWIGGY")
        assert url == "expense-tracker://add?amount=450&desc=SWIGGY&type=expense"

    def test_encodes_description(self):
        url = build_transaction_url(1200.5, "Uber Trip", "income")
        assert url == "expense-tracker://add?amount=1200.5&desc=Uber+Trip&type=income"

    def test_round_trips_through_params(self):
        params = ShortcutParams.from_url(build_transaction_url(99, "Chai & Snacks"))
        assert params.amount == "99"
        assert params.desc == "Chai & Snacks"
        assert params.type == "expense"
        assert params.sms is None


class TestResolveAccount:
    """Tests for matching a sender/bank identifier to an account."""

    def test_identifier_contained_in_name(self, accounts):
        assert resolve_account(accounts, "ICICI").id == "2"

    def test_name_contained_in_identifier(self, accounts):
        assert resolve_account(accounts, "hdfc bank savings").id == "3"

    def test_unknown_identifier_falls_back_to_first_account(self, accounts):
        assert resolve_account(accounts, "Axis").id == "1"

    def test_no_identifier_prefers_bank_account(self, accounts):
        assert resolve_account(accounts).id == "2"

    def test_no_bank_account_uses_first(self):
        wallets = [Account(id="9", name="Paytm", type="wallet")]
        assert resolve_account(wallets).id == "9"

    def test_no_accounts(self):
        assert resolve_account([], "ICICI") is None


class TestProcessShortcut:
    """Tests for turning deep-link params into a transaction draft."""

    def test_sms_param_is_parsed(self, accounts):
        params = ShortcutParams(
            sms="Alert: INR 899.00 spent on your Card XX9012 at SWIGGY.",
            bank="ICICI",
        )
        result = process_shortcut(params, accounts)

        assert result.ok
        assert result.status == STATUS_SUCCESS
        draft = result.transaction
        assert draft.amount == Decimal("899")
        assert draft.type == TransactionType.EXPENSE
        assert draft.category == CategoryId.FOOD
        assert draft.description == "SWIGGY"
        assert draft.account_id == "2"
        assert draft.account_name == "ICICI Bank"
        assert draft.source == "sms"

    def test_url_encoded_sms(self, accounts):
        params = ShortcutParams(sms="Rs.100%20debited.")
        result = process_shortcut(params, accounts)
        assert result.ok
        assert result.transaction.amount == Decimal("100")
        assert result.transaction.description == "Transaction"

    def test_sender_used_when_bank_missing(self, accounts):
        params = ShortcutParams(sms="Rs.100 debited.", sender="HDFC")
        assert process_shortcut(params, accounts).transaction.account_id == "3"

    def test_sms_without_amount_is_an_error(self, accounts):
        result = process_shortcut(ShortcutParams(sms="Your OTP is 1234"), accounts)
        assert result.status == STATUS_ERROR
        assert result.transaction is None
        assert result.errors

    def test_legacy_expense_params(self, accounts):
        params = ShortcutParams(amount="450", desc="SWIGGY", type="expense")
        result = process_shortcut(params, accounts)

        assert result.ok
        assert result.transaction.amount == Decimal("450")
        assert result.transaction.category == CategoryId.FOOD
        assert result.transaction.account_id == "2"

    def test_legacy_income_params(self, accounts):
        params = ShortcutParams(amount="5000", desc="Zomato payout", type="income")
        result = process_shortcut(params, accounts)
        assert result.transaction.type == TransactionType.INCOME
        assert result.transaction.category == CategoryId.INCOME

    def test_legacy_unknown_type_is_expense(self, accounts):
        params = ShortcutParams(amount="20", desc="Misc", type="transfer")
        assert process_shortcut(params, accounts).transaction.type == TransactionType.EXPENSE

    def test_legacy_default_description(self, accounts):
        result = process_shortcut(ShortcutParams(amount="10"), accounts)
        assert result.transaction.description == "Transaction from SMS"

    def test_legacy_bad_amounts_are_errors(self, accounts):
        for raw in ("abc", "-5", "0", None, "nan", "INR 450", "Infinity"):
            result = process_shortcut(ShortcutParams(amount=raw, desc="Test"), accounts)
            assert result.status == STATUS_ERROR, raw

    @pytest.mark.parametrize(
        "raw, expected",
        [("450 INR", Decimal("450")), ("12abc", Decimal("12")), (" 99.5", Decimal("99.5")), ("1e3", Decimal("1000"))],
    )
    def test_legacy_amount_uses_leading_number(self, accounts, raw, expected):
        result = process_shortcut(ShortcutParams(amount=raw, desc="Test"), accounts)
        assert result.ok
        assert result.transaction.amount == expected

    def test_no_accounts_still_builds_draft(self):
        result = process_shortcut(ShortcutParams(amount="10", desc="Test"), [])
        assert result.ok
        assert result.transaction.account_id is None

    def test_draft_to_dict(self, accounts):
        result = process_shortcut(ShortcutParams(amount="450", desc="SWIGGY"), accounts)
        assert result.transaction.to_dict() == {
            "amount": 450.0,
            "type": "expense",
            "category": "food",
            "description": "SWIGGY",
            "account_id": "2",
            "account_name": "ICICI Bank",
            "source": "sms",
        }
