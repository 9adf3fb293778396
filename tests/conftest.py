"""Shared pytest fixtures for all tests."""

import pytest

from sms_txn_parser import BankMessageParser
from sms_txn_parser.shortcut import Account


@pytest.fixture
def parser():
    """A parser bound to the default tables."""
    return BankMessageParser()


@pytest.fixture
def accounts():
    """Accounts as a caller would load them from storage."""
    return [
        Account(id="1", name="Cash", type="cash"),
        Account(id="2", name="ICICI Bank", type="bank"),
        Account(id="3", name="HDFC Bank", type="bank"),
    ]
