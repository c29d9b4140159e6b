from fastapi import APIRouter, Body, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session
from typing import Any, List

from .models import Quote
from . import service
from invoices.models import Invoice
from pdf import service as pdf_service
from database import get_db

router = APIRouter(prefix='/api/quotes', tags=['quotes'])


@router.get('', response_model=List[Quote])
def get_quotes(db: Session = Depends(get_db)):
    """All quotes, newest first"""
    return service.get_all_quotes(db)


@router.post('', response_model=Quote)
def create_quote(quote: dict = Body(...), db: Session = Depends(get_db)):
    return service.create_quote(db, quote)


@router.get('/{quote_id}', response_model=Quote)
def get_quote(quote_id: str, db: Session = Depends(get_db)):
    return service.get_quote_by_id(db, quote_id)


@router.put('/{quote_id}', response_model=Quote)
def update_quote(quote_id: str, quote: Any = Body(None), db: Session = Depends(get_db)):
    return service.update_quote(db, quote_id, quote)


@router.put('/{quote_id}/status', response_model=Quote)
def update_quote_status(
    quote_id: str,
    status_update: Any = Body(None),
    db: Session = Depends(get_db)
):
    return service.update_quote_status(db, quote_id, status_update)


@router.post('/{quote_id}/convert', response_model=Invoice)
def convert_to_invoice(
    quote_id: str,
    conversion: Any = Body(None),
    db: Session = Depends(get_db)
):
    """Convert a quote to a new pending invoice"""
    return service.convert_quote_to_invoice(db, quote_id, conversion)


@router.get('/{quote_id}/pdf', response_class=HTMLResponse)
def get_quote_pdf(quote_id: str, db: Session = Depends(get_db)):
    """Printable quote (HTML for browser print-to-PDF)"""
    return pdf_service.generate_quote_document(db, quote_id)


@router.delete('/{quote_id}')
def delete_quote(quote_id: str, db: Session = Depends(get_db)):
    return service.delete_quote(db, quote_id)
