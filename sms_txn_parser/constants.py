class Constants:
    class Parsing:
        # Merchant candidates must be strictly longer than MIN and shorter than MAX.
        MIN_MERCHANT_NAME_LENGTH = 2
        MAX_MERCHANT_NAME_LENGTH = 50
        FALLBACK_DESCRIPTION = "Transaction"

    class Shortcut:
        URL_SCHEME = "expense-tracker"
        ADD_PATH = "add"
        SMS_FALLBACK_DESCRIPTION = "Transaction from SMS"
