from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .categories import CategoryId
from .transaction_type import TransactionType


@dataclass(frozen=True)
class ParsedTransaction:
    amount: Optional[Decimal]
    type: TransactionType
    category: CategoryId
    description: str

    @property
    def has_valid_amount(self) -> bool:
        """True when an amount was found and it is positive."""
        return self.amount is not None and self.amount > 0

    def to_dict(self) -> dict:
        return {
            "amount": float(self.amount) if self.amount is not None else None,
            "type": self.type.value,
            "category": self.category.value,
            "description": self.description,
        }
