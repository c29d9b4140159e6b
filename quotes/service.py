import logging
from typing import List

from sqlalchemy.orm import Session

from errors import NotFoundError
from invoices.service import build_invoice
from quotes.models import QuoteCreate, QuoteUpdate, QuoteStatusUpdate, QuoteConvert
from line_items.models import price_line_items
from models import Invoice, Quote
from store import Collection, store_operation
from utils.dates import utcnow, today_iso, days_from_today
from utils.numbering import generate_document_id, generate_document_number
from utils.validation import parse_body, require_fields, check_status

logger = logging.getLogger(__name__)

QUOTE_PREFIX = "QUO"
QUOTE_STATUSES = ("pending", "accepted", "rejected", "converted")
REQUIRED_FIELDS = ("client_name", "client_email", "valid_until")

# Default payment window for invoices created from quotes
CONVERSION_DUE_DAYS = 30


# ============================================================
# READS
# ============================================================

def get_all_quotes(db: Session) -> List[Quote]:
    with store_operation(db, "Failed to fetch quotes"):
        return Collection(db, Quote).find_many()


def get_quote_by_id(db: Session, quote_id: str) -> Quote:
    with store_operation(db, "Failed to fetch quote"):
        quote = Collection(db, Quote).find_one(id=quote_id)
    if not quote:
        raise NotFoundError("Quote not found")
    return quote


# ============================================================
# CREATE QUOTE
# ============================================================

def create_quote(db: Session, payload) -> Quote:
    failure = "Failed to create quote"
    data = parse_body(QuoteCreate, payload, failure)
    require_fields(data, REQUIRED_FIELDS, failure)
    items, total = price_line_items(data.items)

    quote = Quote(
        id=generate_document_id(),
        number=generate_document_number(QUOTE_PREFIX),
        date=today_iso(),
        valid_until=data.valid_until,
        client_name=data.client_name,
        client_email=data.client_email,
        vehicle_information=data.vehicle_information or {},
        items=items,
        total=total,
        status="pending",
    )

    with store_operation(db, failure):
        Collection(db, Quote).insert(quote)

    logger.info("Created quote %s (%s)", quote.number, quote.id)
    return quote


# ============================================================
# UPDATE QUOTE
# ============================================================

def update_quote(db: Session, quote_id: str, payload) -> Quote:
    failure = "Failed to update quote"
    quotes = Collection(db, Quote)
    with store_operation(db, failure):
        quote = quotes.find_one(id=quote_id)
        if not quote:
            raise NotFoundError("Quote not found")

        data = parse_body(QuoteUpdate, payload, failure)
        require_fields(data, REQUIRED_FIELDS, failure)
        if data.status:
            check_status(data.status, QUOTE_STATUSES, failure)
        items, total = price_line_items(data.items)

        quote.valid_until = data.valid_until
        quote.client_name = data.client_name
        quote.client_email = data.client_email
        quote.vehicle_information = data.vehicle_information or {}
        quote.items = items
        quote.total = total
        if data.status:
            quote.status = data.status
        quote.updated_at = utcnow()

        return quotes.update(quote)


# ============================================================
# STATUS
# ============================================================

def update_quote_status(db: Session, quote_id: str, payload) -> Quote:
    failure = "Failed to update quote status"
    quotes = Collection(db, Quote)
    with store_operation(db, failure):
        quote = quotes.find_one(id=quote_id)
        if not quote:
            raise NotFoundError("Quote not found")

        update = parse_body(QuoteStatusUpdate, payload, failure)
        status = check_status(update.status, QUOTE_STATUSES, failure)
        previous = quote.status
        quote.status = status
        quote.updated_at = utcnow()
        quotes.update(quote)

    logger.info("Quote %s status %s -> %s", quote.number, previous, status)
    return quote


# ============================================================
# CONVERT QUOTE -> INVOICE
# ============================================================

def convert_quote_to_invoice(db: Session, quote_id: str, payload=None) -> Invoice:
    """
    Create a pending invoice from a quote and mark the quote converted.
    `payload` may carry a dueDate override.
    Both writes are committed together: either the invoice exists and the
    quote is converted, or neither change is stored.
    """
    quotes = Collection(db, Quote)
    invoices = Collection(db, Invoice)

    failure = "Failed to convert quote to invoice"
    with store_operation(db, failure):
        quote = quotes.find_one(id=quote_id)
        if not quote:
            raise NotFoundError("Quote not found")

        due_date = parse_body(QuoteConvert, payload, failure).due_date
        invoice = build_invoice(
            due_date=due_date or days_from_today(CONVERSION_DUE_DAYS),
            client_name=quote.client_name,
            client_email=quote.client_email,
            vehicle_information=dict(quote.vehicle_information or {}),
            items=[dict(item) for item in quote.items or []],
            total=quote.total,
        )
        invoices.insert(invoice, commit=False)

        quote.status = "converted"
        quote.updated_at = utcnow()
        invoices.commit(invoice, quote)

    logger.info("Converted quote %s to invoice %s", quote.number, invoice.number)
    return invoice


# ============================================================
# DELETE QUOTE
# ============================================================

def delete_quote(db: Session, quote_id: str) -> dict:
    with store_operation(db, "Failed to delete quote"):
        deleted = Collection(db, Quote).delete(id=quote_id)
    if not deleted:
        raise NotFoundError("Quote not found")

    logger.info("Deleted quote %s", quote_id)
    return {"success": True, "message": "Quote deleted successfully"}
