from enum import Enum

class TransactionType(Enum):
    INCOME = "income"
    EXPENSE = "expense"
