import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, Sequence, Tuple

from .categories import CATEGORY_KEYWORDS, RESERVED_CATEGORIES, CategoryId
from .compiled_patterns import CompiledPatterns
from .constants import Constants
from .parsed_transaction import ParsedTransaction
from .transaction_type import TransactionType

logger = logging.getLogger(__name__)

KeywordTable = Sequence[Tuple[CategoryId, Sequence[str]]]
MerchantRule = Tuple[re.Pattern, Callable[[str], bool]]


def is_valid_merchant_name(name: str) -> bool:
    return (
        Constants.Parsing.MIN_MERCHANT_NAME_LENGTH
        < len(name)
        < Constants.Parsing.MAX_MERCHANT_NAME_LENGTH
    )


class BankMessageParser:
    """
    Rule-based parser for bank SMS / notification text.

    Every stage is an ordered list of patterns evaluated first-match-wins, so
    the result depends only on the message and the tables bound here.
    """

    def __init__(
        self,
        keyword_table: KeywordTable = CATEGORY_KEYWORDS,
        amount_patterns: Sequence[re.Pattern] = CompiledPatterns.Amount.ALL_PATTERNS,
        income_patterns: Sequence[re.Pattern] = CompiledPatterns.Direction.INCOME_PATTERNS,
        expense_patterns: Sequence[re.Pattern] = CompiledPatterns.Direction.EXPENSE_PATTERNS,
        merchant_rules: Optional[Sequence[MerchantRule]] = None,
    ):
        self.keyword_table = tuple(
            (category, tuple(kw.lower() for kw in keywords))
            for category, keywords in keyword_table
        )
        self.amount_patterns = tuple(amount_patterns)
        self.income_patterns = tuple(income_patterns)
        self.expense_patterns = tuple(expense_patterns)
        if merchant_rules is None:
            merchant_rules = [
                (pattern, is_valid_merchant_name)
                for pattern in CompiledPatterns.Merchant.ALL_PATTERNS
            ]
        self.merchant_rules = tuple(merchant_rules)

    def parse(self, message: Optional[str]) -> ParsedTransaction:
        """Parses a bank message into a ParsedTransaction. Never raises."""
        message = message or ""

        amount = self.extract_amount(message)
        txn_type = self.extract_transaction_type(message)
        category = self.categorize(message, txn_type)
        merchant = self.extract_merchant(message)

        if not merchant:
            logger.debug("No merchant found, using fallback description")
            merchant = Constants.Parsing.FALLBACK_DESCRIPTION

        return ParsedTransaction(
            amount=amount,
            type=txn_type,
            category=category,
            description=merchant,
        )

    # -------------------------------------------------------------------------
    # extract_amount
    # -------------------------------------------------------------------------
    def extract_amount(self, message: Optional[str]) -> Optional[Decimal]:
        # Only the first match of each pattern is considered; the first
        # currency-tagged number in the text wins even if a balance comes later.
        message = message or ""
        for pattern in self.amount_patterns:
            m = pattern.search(message)
            if not m:
                continue
            try:
                amount = Decimal(m.group(1).replace(",", ""))
            except InvalidOperation:
                logger.debug(f"Unparseable amount {m.group(1)!r} from {pattern.pattern}")
                continue
            if amount.is_finite() and amount > 0:
                return amount
        return None

    # -------------------------------------------------------------------------
    # extract_transaction_type
    # -------------------------------------------------------------------------
    def extract_transaction_type(self, message: Optional[str]) -> TransactionType:
        lower = (message or "").lower()

        for pattern in self.income_patterns:
            if pattern.search(lower):
                return TransactionType.INCOME

        for pattern in self.expense_patterns:
            if pattern.search(lower):
                return TransactionType.EXPENSE

        # Unclassifiable alerts are overwhelmingly debits.
        return TransactionType.EXPENSE

    # -------------------------------------------------------------------------
    # categorize
    # -------------------------------------------------------------------------
    def categorize(
        self,
        text: Optional[str],
        txn_type: TransactionType = TransactionType.EXPENSE,
    ) -> CategoryId:
        if txn_type == TransactionType.INCOME:
            return CategoryId.INCOME

        lower = (text or "").lower()
        for category, keywords in self.keyword_table:
            if category in RESERVED_CATEGORIES:
                continue
            for keyword in keywords:
                if keyword in lower:
                    logger.debug(f"Matched keyword {keyword!r} -> {category.value}")
                    return category

        return CategoryId.OTHER

    # -------------------------------------------------------------------------
    # extract_merchant
    # -------------------------------------------------------------------------
    def extract_merchant(self, message: Optional[str]) -> Optional[str]:
        message = message or ""
        for pattern, is_valid in self.merchant_rules:
            m = pattern.search(message)
            if m and m.group(1):
                merchant = m.group(1).strip()
                if is_valid(merchant):
                    return merchant
        return None


_default_parser = BankMessageParser()


def parse_bank_message(message: Optional[str]) -> ParsedTransaction:
    return _default_parser.parse(message)


def categorize_transaction(description: Optional[str]) -> CategoryId:
    """Keyword categorization for text already known not to be income."""
    return _default_parser.categorize(description, TransactionType.EXPENSE)


def extract_amount(message: Optional[str]) -> Optional[Decimal]:
    return _default_parser.extract_amount(message)


def detect_transaction_type(message: Optional[str]) -> TransactionType:
    return _default_parser.extract_transaction_type(message)
