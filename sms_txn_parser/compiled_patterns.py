import re

class CompiledPatterns:
    class Amount:
        CURRENCY_BEFORE = re.compile(r"(?:rs\.?|inr|₹)\s*([\d,]+(?:\.\d{2})?)", re.IGNORECASE | re.ASCII)
        CURRENCY_AFTER = re.compile(r"([\d,]+(?:\.\d{2})?)\s*(?:rs\.?|inr|₹)", re.IGNORECASE | re.ASCII)
        LABELLED = re.compile(r"(?:amount|amt)[:\s]*([\d,]+(?:\.\d{2})?)", re.IGNORECASE | re.ASCII)
        ALL_PATTERNS = (CURRENCY_BEFORE, CURRENCY_AFTER, LABELLED)

    class Direction:
        INCOME_PATTERNS = (
            re.compile(r"credited", re.IGNORECASE | re.ASCII),
            re.compile(r"received", re.IGNORECASE | re.ASCII),
            re.compile(r"cr\b", re.IGNORECASE | re.ASCII),
            re.compile(r"deposit", re.IGNORECASE | re.ASCII),
            re.compile(r"refund", re.IGNORECASE | re.ASCII),
            re.compile(r"cashback", re.IGNORECASE | re.ASCII),
        )
        EXPENSE_PATTERNS = (
            re.compile(r"debited", re.IGNORECASE | re.ASCII),
            re.compile(r"spent", re.IGNORECASE | re.ASCII),
            re.compile(r"paid", re.IGNORECASE | re.ASCII),
            re.compile(r"dr\b", re.IGNORECASE | re.ASCII),
            re.compile(r"purchase", re.IGNORECASE | re.ASCII),
            re.compile(r"withdrawn", re.IGNORECASE | re.ASCII),
            re.compile(r"payment of", re.IGNORECASE | re.ASCII),
        )

    class Merchant:
        # Case-sensitive: the preposition must be lower case and the name capitalised.
        PREPOSITION_PATTERN = re.compile(
            r"(?:at|to|for|@)\s+([A-Z][A-Za-z0-9\s&.-]+?)(?:\s+on|\s+via|\s+ref|\.|\s*$)"
        )
        TRANSFER_TAG_PATTERN = re.compile(
            r"(?:UPI|IMPS|NEFT)[:\s-]+([A-Za-z0-9\s&.-]+?)(?:\s+on|\s+via|\s+ref|\.|\s*$)",
            re.IGNORECASE
        )
        EXPENSE_VERB_PATTERN = re.compile(
            r"(?:spent|paid|purchase)\s+(?:at|to|for)\s+([A-Za-z0-9\s&.-]+)",
            re.IGNORECASE
        )
        ALL_PATTERNS = (PREPOSITION_PATTERN, TRANSFER_TAG_PATTERN, EXPENSE_VERB_PATTERN)
