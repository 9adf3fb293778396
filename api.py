import logging
from typing import List, Optional

import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict, Field

from sms_txn_parser import CATEGORIES, categorize_transaction, parse_bank_message
from sms_txn_parser.config import config
from sms_txn_parser.logging_config import setup_logging
from sms_txn_parser.samples import scan_messages
from sms_txn_parser.shortcut import Account, ShortcutParams, process_shortcut

logger = logging.getLogger("sms_txn_parser.api")

app = FastAPI(
    title="SMS Transaction Parser API",
    description="API for parsing bank SMS messages into categorized income/expense transactions.",
    version=config.VERSION,
)


class SMSRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(None, alias="_id")
    body: str
    address: Optional[str] = None


class ParseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(None, alias="_id")
    amount: Optional[float] = None
    type: str
    category: str
    description: str
    sender: Optional[str] = None
    status: str = "success"


class CategorizeRequest(BaseModel):
    description: str


class CategorizeResponse(BaseModel):
    category: str


class AccountModel(BaseModel):
    id: str
    name: str
    type: str = "bank"


class ShortcutRequest(BaseModel):
    amount: Optional[str] = None
    desc: Optional[str] = None
    type: Optional[str] = None
    bank: Optional[str] = None
    sms: Optional[str] = None
    sender: Optional[str] = None
    accounts: List[AccountModel] = []


def format_parsed_txn(request: SMSRequest) -> dict:
    parsed = parse_bank_message(request.body)
    result = parsed.to_dict()
    result["_id"] = request.id
    result["sender"] = request.address
    # Callers reject transactions without a positive amount.
    result["status"] = "success" if parsed.has_valid_amount else "unparsed"
    return result


@app.post("/parse", response_model=ParseResponse)
async def parse_sms(request: SMSRequest):
    """
    Parse a single bank SMS message.
    """
    return format_parsed_txn(request)


@app.post("/parse-batch", response_model=List[ParseResponse])
async def parse_sms_batch(requests: List[SMSRequest]):
    """
    Parse multiple SMS messages in one request.
    """
    results = [format_parsed_txn(request) for request in requests]
    parsed_count = sum(1 for r in results if r["status"] == "success")
    logger.info(f"Parsed batch of {len(results)} messages, {parsed_count} with an amount")
    return results


@app.post("/categorize", response_model=CategorizeResponse)
async def categorize(request: CategorizeRequest):
    return {"category": categorize_transaction(request.description).value}


@app.post("/shortcut")
async def shortcut(request: ShortcutRequest):
    """
    Handle the parameters of an automation deep link.
    """
    params = ShortcutParams(
        amount=request.amount,
        desc=request.desc,
        type=request.type,
        bank=request.bank,
        sms=request.sms,
        sender=request.sender,
    )
    accounts = [Account(id=a.id, name=a.name, type=a.type) for a in request.accounts]
    result = process_shortcut(params, accounts)
    return {
        "status": result.status,
        "transaction": result.transaction.to_dict() if result.transaction else None,
        "errors": result.errors,
    }


@app.get("/scan")
async def scan():
    return [msg.to_dict() for msg in scan_messages()]


@app.get("/categories")
async def categories():
    return {
        category.value: {"name": info.name, "icon": info.icon, "color": info.color}
        for category, info in CATEGORIES.items()
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    setup_logging()
    uvicorn.run(app, host=config.API_HOST, port=int(config.API_PORT))
