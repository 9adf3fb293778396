from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class CategoryId(Enum):
    FOOD = "food"
    TRANSPORT = "transport"
    SHOPPING = "shopping"
    BILLS = "bills"
    ENTERTAINMENT = "entertainment"
    HEALTH = "health"
    INCOME = "income"
    OTHER = "other"


# Ordered (category, keywords) pairs. The categorizer walks this top to bottom,
# so moving a category up changes which one wins on overlapping keywords.
CATEGORY_KEYWORDS: Tuple[Tuple[CategoryId, Tuple[str, ...]], ...] = (
    (CategoryId.FOOD, (
        # delivery
        "swiggy", "zomato", "uber eats", "ubereats", "dominos", "pizza hut", "pizzahut",
        "mcdonalds", "mcd", "burger king", "kfc", "subway", "starbucks", "cafe",
        # restaurants
        "restaurant", "dining", "food", "kitchen", "biryani", "curry", "hotel",
        "bakery", "eatery", "diner", "bistro", "canteen",
        # groceries
        "bigbasket", "blinkit", "zepto", "instamart", "grofers", "dmart", "reliance fresh",
        "grocery", "supermarket", "vegetables", "fruits",
    )),
    (CategoryId.TRANSPORT, (
        "uber", "ola", "rapido", "meru", "auto", "taxi", "cab",
        # fuel
        "petrol", "diesel", "fuel", "indian oil", "iocl", "hp", "bharat petroleum", "bpcl",
        "shell", "reliance petrol", "essar",
        "metro", "railway", "irctc", "bus", "redbus", "abhibus",
        "parking", "fastag", "toll", "paytm fastag",
    )),
    (CategoryId.SHOPPING, (
        "amazon", "flipkart", "myntra", "ajio", "meesho", "snapdeal", "tata cliq",
        "nykaa", "purplle", "mamaearth",
        # electronics
        "croma", "reliance digital", "vijay sales", "apple", "samsung",
        # fashion
        "zara", "h&m", "uniqlo", "pantaloons", "lifestyle", "shoppers stop", "max",
        "mall", "shop", "store", "mart", "retail", "purchase",
    )),
    (CategoryId.BILLS, (
        # utilities
        "electricity", "electric", "power", "bescom", "tata power", "adani power",
        "gas", "mahanagar gas", "piped gas", "lpg", "indane", "bharat gas",
        "water", "water board",
        # telecom
        "jio", "airtel", "vi", "vodafone", "idea", "bsnl", "recharge", "prepaid", "postpaid",
        "broadband", "wifi", "internet", "act fibernet", "hathway",
        # insurance
        "insurance", "lic", "hdfc life", "icici prudential", "premium",
        # rent & emi
        "rent", "emi", "loan", "housing",
    )),
    (CategoryId.ENTERTAINMENT, (
        # streaming
        "netflix", "prime video", "amazon prime", "hotstar", "disney", "sony liv",
        "zee5", "voot", "jiocinema", "mubi", "apple tv",
        # music
        "spotify", "gaana", "jiosaavn", "wynk", "apple music", "youtube music",
        # gaming
        "steam", "playstation", "xbox", "nintendo", "epic games", "gaming",
        "bookmyshow", "paytm movies", "pvr", "inox", "cinepolis", "movie", "cinema",
        "concert", "event", "ticket",
        "subscription", "membership",
    )),
    (CategoryId.HEALTH, (
        # pharmacy
        "apollo", "netmeds", "1mg", "pharmeasy", "medplus", "pharmacy", "medicine",
        "medical", "drug", "tablet",
        "hospital", "clinic", "doctor", "consultation", "diagnostic", "lab", "pathology",
        "healthcare", "health", "treatment",
        # fitness
        "gym", "fitness", "yoga", "cult.fit", "cult fit", "gold gym",
        "spa", "massage", "wellness", "ayurveda",
    )),
    # Income is only ever assigned from the message direction; these words are
    # never used to categorize an expense.
    (CategoryId.INCOME, (
        "salary", "credited", "received", "payment received", "refund",
        "cashback", "reward", "bonus", "incentive", "commission",
        "transferred to your", "money received", "upi cr", "imps cr", "neft cr",
    )),
    (CategoryId.OTHER, ()),
)

# Never produced by a keyword hit.
RESERVED_CATEGORIES = frozenset({CategoryId.INCOME, CategoryId.OTHER})


@dataclass(frozen=True)
class CategoryInfo:
    """Display metadata shared with whatever renders a category."""

    id: CategoryId
    name: str
    icon: str
    color: str


CATEGORIES: Dict[CategoryId, CategoryInfo] = {
    CategoryId.FOOD: CategoryInfo(CategoryId.FOOD, "Food & Dining", "fast-food", "#FF6B6B"),
    CategoryId.TRANSPORT: CategoryInfo(CategoryId.TRANSPORT, "Transport", "car", "#4ECDC4"),
    CategoryId.SHOPPING: CategoryInfo(CategoryId.SHOPPING, "Shopping", "bag-handle", "#FFE66D"),
    CategoryId.BILLS: CategoryInfo(CategoryId.BILLS, "Bills & Utilities", "receipt", "#95E1D3"),
    CategoryId.ENTERTAINMENT: CategoryInfo(
        CategoryId.ENTERTAINMENT, "Entertainment", "game-controller", "#DDA0DD"
    ),
    CategoryId.HEALTH: CategoryInfo(CategoryId.HEALTH, "Health", "medical", "#98D8C8"),
    CategoryId.INCOME: CategoryInfo(CategoryId.INCOME, "Income", "wallet", "#00E676"),
    CategoryId.OTHER: CategoryInfo(CategoryId.OTHER, "Other", "ellipsis-horizontal", "#8E8E93"),
}

