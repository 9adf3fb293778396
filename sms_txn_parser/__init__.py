from .bank_parser import (
    BankMessageParser,
    categorize_transaction,
    detect_transaction_type,
    extract_amount,
    parse_bank_message,
)
from .categories import CATEGORIES, CATEGORY_KEYWORDS, CategoryId, CategoryInfo
from .compiled_patterns import CompiledPatterns
from .constants import Constants
from .parsed_transaction import ParsedTransaction
from .transaction_type import TransactionType

__all__ = [
    "BankMessageParser",
    "CATEGORIES",
    "CATEGORY_KEYWORDS",
    "CategoryId",
    "CategoryInfo",
    "CompiledPatterns",
    "Constants",
    "ParsedTransaction",
    "TransactionType",
    "categorize_transaction",
    "detect_transaction_type",
    "extract_amount",
    "parse_bank_message",
]
