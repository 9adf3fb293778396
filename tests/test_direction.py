import pytest

from sms_txn_parser import TransactionType, detect_transaction_type


class TestDetectTransactionType:
    """Tests for income/expense direction classification."""

    @pytest.mark.parametrize(
        "message",
        [
            "Rs.2,500 credited to your A/c XX5678 via IMPS",
            "You have received Rs.300 from Ramesh",
            "UPI CR of Rs.50 to A/c XX1111",
            "Cash deposit of Rs.10,000 at branch",
            "Refund of Rs.120 initiated",
            "Cashback of Rs.25 added to wallet",
            "RS.100 CREDITED TO A/C",
        ],
    )
    def test_income_cues(self, message):
        assert detect_transaction_type(message) == TransactionType.INCOME

    @pytest.mark.parametrize(
        "message",
        [
            "Rs.100 debited from A/c XX1234",
            "INR 899.00 spent on your Card XX9012",
            "You paid Rs.40 to Chai Point",
            "Purchase of Rs 50 at store",
            "Rs.2,000 withdrawn from ATM",
            "Payment of Rs.999 to Jio successful",
        ],
    )
    def test_expense_cues(self, message):
        assert detect_transaction_type(message) == TransactionType.EXPENSE

    def test_income_cue_wins_over_expense_cue(self):
        message = "refund processed, payment of Rs.200 adjusted"
        assert detect_transaction_type(message) == TransactionType.INCOME

    def test_no_cue_defaults_to_expense(self):
        assert detect_transaction_type("Rs.75 at the canteen") == TransactionType.EXPENSE

    def test_empty_and_none_default_to_expense(self):
        assert detect_transaction_type("") == TransactionType.EXPENSE
        assert detect_transaction_type(None) == TransactionType.EXPENSE

    def test_cue_boundary_is_ascii_word_boundary(self):
        """Only ASCII letters and digits count as word characters after a cue."""
        assert detect_transaction_type("Rs.50 cré") == TransactionType.INCOME
        assert detect_transaction_type("Rs.50 dré") == TransactionType.EXPENSE
        assert detect_transaction_type("Rs.50 crx") == TransactionType.EXPENSE
