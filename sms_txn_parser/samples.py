"""Fixed batch of bank messages used by the scan demo."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .bank_parser import parse_bank_message
from .parsed_transaction import ParsedTransaction


@dataclass(frozen=True)
class SampleMessage:
    id: str
    sender: str
    message: str


SAMPLE_MESSAGES = (
    SampleMessage(
        id="sms1",
        sender="HDFC-Bank",
        message="Your A/c XX1234 debited by Rs.450.00 on 02-Jan for UPI-Amazon. Avl Bal Rs.12,550.00",
    ),
    SampleMessage(
        id="sms2",
        sender="SBI-Bank",
        message="Rs.2,500 credited to your A/c XX5678 via IMPS. Avl Bal: Rs.45,000",
    ),
    SampleMessage(
        id="sms3",
        sender="ICICI-Bank",
        message="Alert: INR 899.00 spent on your Card XX9012 at SWIGGY. If not done by you, call 1800XXX",
    ),
    SampleMessage(
        id="sms4",
        sender="Axis-Bank",
        message="Your A/c debited for Rs.1,200 on 30-Dec at UBER TRIP. SMS BLOCK to 9999000000 if not you.",
    ),
    SampleMessage(
        id="sms5",
        sender="HDFC-Bank",
        message="Payment of Rs.2,499 received for your Electricity Bill. Transaction ID: TXN123456",
    ),
)


@dataclass
class ScannedMessage:
    id: str
    sender: str
    message: str
    parsed: ParsedTransaction
    selected: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sender": self.sender,
            "message": self.message,
            "parsed": self.parsed.to_dict(),
            "selected": self.selected,
        }


def scan_messages(messages: Optional[Iterable[SampleMessage]] = None) -> List[ScannedMessage]:
    if messages is None:
        messages = SAMPLE_MESSAGES
    return [
        ScannedMessage(id=sms.id, sender=sms.sender, message=sms.message, parsed=parse_bank_message(sms.message))
        for sms in messages
    ]


def select_importable(scanned: Iterable[ScannedMessage]) -> List[ScannedMessage]:
    """Selected messages whose parse produced a positive amount."""
    return [msg for msg in scanned if msg.selected and msg.parsed.has_valid_amount]
