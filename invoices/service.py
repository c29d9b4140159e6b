import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from errors import NotFoundError
from invoices.models import InvoiceCreate, InvoiceUpdate, InvoiceStatusUpdate
from line_items.models import price_line_items
from models import Invoice
from store import Collection, store_operation
from utils.dates import utcnow, today_iso
from utils.numbering import generate_document_id, generate_document_number
from utils.validation import parse_body, require_fields, check_status

logger = logging.getLogger(__name__)

INVOICE_PREFIX = "INV"
INVOICE_STATUSES = ("pending", "paid", "overdue")
REQUIRED_FIELDS = ("client_name", "client_email", "due_date")


# ============================================================
# INVOICE BUILDER (shared with quote conversion)
# ============================================================

def build_invoice(due_date: str, client_name: str, client_email: str,
                  vehicle_information: Optional[dict], items: List[dict],
                  total: float, work_description: str = "") -> Invoice:
    """A new pending invoice with a fresh id, number and issue date."""
    return Invoice(
        id=generate_document_id(),
        number=generate_document_number(INVOICE_PREFIX),
        date=today_iso(),
        due_date=due_date,
        client_name=client_name,
        client_email=client_email,
        vehicle_information=vehicle_information or {},
        items=items,
        work_description=work_description or "",
        total=total,
        status="pending",
    )


# ============================================================
# READS
# ============================================================

def get_all_invoices(db: Session) -> List[Invoice]:
    with store_operation(db, "Failed to fetch invoices"):
        return Collection(db, Invoice).find_many()


def get_invoice_by_id(db: Session, invoice_id: str) -> Invoice:
    with store_operation(db, "Failed to fetch invoice"):
        invoice = Collection(db, Invoice).find_one(id=invoice_id)
    if not invoice:
        raise NotFoundError("Invoice not found")
    return invoice


# ============================================================
# CREATE INVOICE
# ============================================================

def create_invoice(db: Session, payload) -> Invoice:
    failure = "Failed to create invoice"
    data = parse_body(InvoiceCreate, payload, failure)
    require_fields(data, REQUIRED_FIELDS, failure)
    items, total = price_line_items(data.items)

    # Status always starts as pending, whatever the caller sent
    invoice = build_invoice(
        due_date=data.due_date,
        client_name=data.client_name,
        client_email=data.client_email,
        vehicle_information=data.vehicle_information,
        items=items,
        total=total,
        work_description=data.work_description,
    )

    with store_operation(db, failure):
        Collection(db, Invoice).insert(invoice)

    logger.info("Created invoice %s (%s)", invoice.number, invoice.id)
    return invoice


# ============================================================
# UPDATE INVOICE (full replace of mutable fields)
# ============================================================

def update_invoice(db: Session, invoice_id: str, payload) -> Invoice:
    failure = "Failed to update invoice"
    invoices = Collection(db, Invoice)
    with store_operation(db, failure):
        invoice = invoices.find_one(id=invoice_id)
        if not invoice:
            raise NotFoundError("Invoice not found")

        data = parse_body(InvoiceUpdate, payload, failure)
        require_fields(data, REQUIRED_FIELDS, failure)
        if data.status:
            check_status(data.status, INVOICE_STATUSES, failure)
        items, total = price_line_items(data.items)

        invoice.due_date = data.due_date
        invoice.client_name = data.client_name
        invoice.client_email = data.client_email
        invoice.vehicle_information = data.vehicle_information or {}
        invoice.items = items
        invoice.work_description = data.work_description or ""
        invoice.total = total
        if data.status:
            invoice.status = data.status
        invoice.updated_at = utcnow()

        return invoices.update(invoice)


# ============================================================
# STATUS
# ============================================================

def update_invoice_status(db: Session, invoice_id: str, payload) -> Invoice:
    failure = "Failed to update invoice status"
    invoices = Collection(db, Invoice)
    with store_operation(db, failure):
        invoice = invoices.find_one(id=invoice_id)
        if not invoice:
            raise NotFoundError("Invoice not found")

        update = parse_body(InvoiceStatusUpdate, payload, failure)
        status = check_status(update.status, INVOICE_STATUSES, failure)
        previous = invoice.status
        invoice.status = status
        invoice.updated_at = utcnow()
        invoices.update(invoice)

    logger.info("Invoice %s status %s -> %s", invoice.number, previous, status)
    return invoice


# ============================================================
# DELETE
# ============================================================

def delete_invoice(db: Session, invoice_id: str) -> dict:
    with store_operation(db, "Failed to delete invoice"):
        deleted = Collection(db, Invoice).delete(id=invoice_id)
    if not deleted:
        raise NotFoundError("Invoice not found")

    logger.info("Deleted invoice %s", invoice_id)
    return {"success": True, "message": "Invoice deleted successfully"}
