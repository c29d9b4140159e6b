from fastapi import APIRouter, Body, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session
from typing import Any, List

from .models import Invoice
from . import service
from pdf import service as pdf_service
from database import get_db

router = APIRouter(prefix='/api/invoices', tags=['invoices'])

# Bodies are validated in the service, after the id lookup, so a missing
# document answers 404 whatever the body holds.


@router.get('', response_model=List[Invoice])
def get_invoices(db: Session = Depends(get_db)):
    """All invoices, newest first"""
    return service.get_all_invoices(db)


@router.post('', response_model=Invoice)
def create_invoice(invoice: dict = Body(...), db: Session = Depends(get_db)):
    return service.create_invoice(db, invoice)


@router.get('/{invoice_id}', response_model=Invoice)
def get_invoice(invoice_id: str, db: Session = Depends(get_db)):
    return service.get_invoice_by_id(db, invoice_id)


@router.put('/{invoice_id}', response_model=Invoice)
def update_invoice(invoice_id: str, invoice: Any = Body(None), db: Session = Depends(get_db)):
    """Replace the editable fields of an invoice"""
    return service.update_invoice(db, invoice_id, invoice)


@router.put('/{invoice_id}/status', response_model=Invoice)
def update_invoice_status(
    invoice_id: str,
    status_update: Any = Body(None),
    db: Session = Depends(get_db)
):
    return service.update_invoice_status(db, invoice_id, status_update)


@router.get('/{invoice_id}/pdf', response_class=HTMLResponse)
def get_invoice_pdf(invoice_id: str, db: Session = Depends(get_db)):
    """Printable invoice (HTML for browser print-to-PDF)"""
    return pdf_service.generate_invoice_document(db, invoice_id)


@router.delete('/{invoice_id}')
def delete_invoice(invoice_id: str, db: Session = Depends(get_db)):
    return service.delete_invoice(db, invoice_id)
