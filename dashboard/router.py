from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session
from typing import List

from invoices.models import Invoice
from quotes.models import Quote
from . import service
from database import get_db

router = APIRouter(prefix='/api/dashboard', tags=['dashboard'])


class Dashboard(BaseModel):
    invoices: List[Invoice]
    quotes: List[Quote]


@router.get('', response_model=Dashboard)
def get_dashboard(db: Session = Depends(get_db)):
    """Invoices and quotes, each newest first"""
    return service.get_dashboard(db)
