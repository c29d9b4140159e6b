from typing import Any, Dict, List, Optional
from datetime import datetime

from line_items.models import LineItem
from utils.schemas import CamelModel


class InvoiceBase(CamelModel):
    due_date: Optional[str] = None
    client_name: Optional[str] = None
    client_email: Optional[str] = None
    vehicle_information: Dict[str, Any] = {}
    items: List[LineItem] = []
    work_description: Optional[str] = ''
    # Accepted for compatibility; the stored total is recomputed from items
    total: Optional[float] = None
    status: Optional[str] = None


class InvoiceCreate(InvoiceBase):
    pass


class InvoiceUpdate(InvoiceBase):
    pass


class InvoiceStatusUpdate(CamelModel):
    status: Optional[str] = None


class Invoice(CamelModel):
    id: str
    number: str
    date: str
    due_date: str
    client_name: str
    client_email: str
    vehicle_information: Dict[str, Any] = {}
    items: List[LineItem] = []
    work_description: str = ''
    total: float
    status: str
    created_at: datetime
    updated_at: datetime
