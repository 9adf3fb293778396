"""Deep-link handling for transactions pushed in by an automation shortcut.

Links look like ``expense-tracker://add-from-shortcut?sms=...&sender=HDFC``
or, for older shortcuts, carry pre-split ``amount``/``desc``/``type`` params.
Nothing here is persisted; callers receive a draft plus a status.
"""

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence
from urllib.parse import parse_qs, unquote, urlencode, urlparse

from .bank_parser import categorize_transaction, parse_bank_message
from .categories import CategoryId
from .constants import Constants
from .transaction_type import TransactionType

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"

LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class Account:
    id: str
    name: str
    type: str = "bank"


@dataclass
class ShortcutParams:
    amount: Optional[str] = None
    desc: Optional[str] = None
    type: Optional[str] = None
    bank: Optional[str] = None
    sms: Optional[str] = None
    sender: Optional[str] = None

    @classmethod
    def from_url(cls, url: str) -> "ShortcutParams":
        query = parse_qs(urlparse(url).query)
        values = {key: query[key][0] for key in ("amount", "desc", "type", "bank", "sms", "sender") if key in query}
        return cls(**values)


@dataclass
class TransactionDraft:
    amount: Decimal
    type: TransactionType
    category: CategoryId
    description: str
    account_id: Optional[str] = None
    account_name: Optional[str] = None
    source: str = "sms"

    def to_dict(self) -> dict:
        return {
            "amount": float(self.amount),
            "type": self.type.value,
            "category": self.category.value,
            "description": self.description,
            "account_id": self.account_id,
            "account_name": self.account_name,
            "source": self.source,
        }


@dataclass
class ShortcutResult:
    status: str
    transaction: Optional[TransactionDraft] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS


def build_transaction_url(
    amount,
    description: str,
    type: str = TransactionType.EXPENSE.value,
) -> str:
    params = urlencode({"amount": str(amount), "desc": description, "type": type})
    return f"{Constants.Shortcut.URL_SCHEME}://{Constants.Shortcut.ADD_PATH}?{params}"


def resolve_account(
    accounts: Sequence[Account],
    bank_identifier: Optional[str] = None,
) -> Optional[Account]:
    """
    Pick the account a shortcut transaction belongs to.

    With an identifier, the first account whose name contains it (or is
    contained in it, case-insensitively) wins, else the first account.
    Without one, the first bank account wins, else the first account.
    """
    if not accounts:
        return None

    identifier = unquote(bank_identifier or "").strip().lower()
    if identifier:
        for account in accounts:
            name = account.name.lower()
            if identifier in name or name in identifier:
                return account
        return accounts[0]

    for account in accounts:
        if account.type == "bank":
            return account
    return accounts[0]


def _parse_amount(raw: Optional[str]) -> Optional[Decimal]:
    # Leading numeric prefix only, so "450 INR" reads as 450.
    m = LEADING_NUMBER.match(raw or "0")
    if not m:
        return None
    return Decimal(m.group(0).strip())


def process_shortcut(params: ShortcutParams, accounts: Sequence[Account]) -> ShortcutResult:
    if params.sms:
        sms = unquote(params.sms)
        logger.info("Parsing SMS from shortcut")
        parsed = parse_bank_message(sms)
        amount = parsed.amount if parsed.amount is not None else Decimal("0")
        description = parsed.description or Constants.Shortcut.SMS_FALLBACK_DESCRIPTION
        txn_type = parsed.type
        category = parsed.category
    else:
        amount = _parse_amount(params.amount)
        description = unquote(params.desc or Constants.Shortcut.SMS_FALLBACK_DESCRIPTION)
        txn_type = TransactionType.INCOME if params.type == "income" else TransactionType.EXPENSE
        if txn_type == TransactionType.INCOME:
            category = CategoryId.INCOME
        else:
            category = categorize_transaction(description)

    if amount is None or amount <= 0:
        logger.warning(f"Rejecting shortcut transaction with amount {amount}")
        return ShortcutResult(status=STATUS_ERROR, errors=["Amount missing or not positive"])

    account = resolve_account(accounts, params.bank or params.sender)

    draft = TransactionDraft(
        amount=amount,
        type=txn_type,
        category=category,
        description=description,
        account_id=account.id if account else None,
        account_name=account.name if account else None,
    )
    logger.info(f"Shortcut transaction ready: {draft.amount} {draft.type.value} ({draft.category.value})")
    return ShortcutResult(status=STATUS_SUCCESS, transaction=draft)
