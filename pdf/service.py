import logging
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from business_config import service as config_service
from business_config.models import BusinessConfig
from invoices import service as invoice_service
from invoices.models import Invoice
from quotes import service as quote_service
from quotes.models import Quote
from pdf.builder import render_document_html

logger = logging.getLogger(__name__)


def _config_dict(db: Session) -> dict:
    """Stored configuration in wire shape, or {} when none exists yet."""
    config = config_service.find_config(db)
    if config is None:
        return {}
    return BusinessConfig.model_validate(config).model_dump(by_alias=True)


# ============================================================
# INVOICE DOCUMENT
# ============================================================
def generate_invoice_document(db: Session, invoice_id: str) -> HTMLResponse:
    """Fetch the invoice and business identity, then render printable HTML."""
    invoice = invoice_service.get_invoice_by_id(db, invoice_id)
    document = Invoice.model_validate(invoice).model_dump(by_alias=True)

    html = render_document_html(document, "invoice", _config_dict(db))
    logger.debug("Rendered invoice %s", document["number"])
    return HTMLResponse(content=html)


# ============================================================
# QUOTE DOCUMENT
# ============================================================
def generate_quote_document(db: Session, quote_id: str) -> HTMLResponse:
    quote = quote_service.get_quote_by_id(db, quote_id)
    document = Quote.model_validate(quote).model_dump(by_alias=True)

    html = render_document_html(document, "quote", _config_dict(db))
    logger.debug("Rendered quote %s", document["number"])
    return HTMLResponse(content=html)
