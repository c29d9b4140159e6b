from typing import Any, Dict, List, Optional
from datetime import datetime

from line_items.models import LineItem
from utils.schemas import CamelModel


# -----------------------------
# Base Quote Schema
# -----------------------------
class QuoteBase(CamelModel):
    valid_until: Optional[str] = None
    client_name: Optional[str] = None
    client_email: Optional[str] = None
    vehicle_information: Dict[str, Any] = {}
    items: List[LineItem] = []
    total: Optional[float] = None
    status: Optional[str] = None


class QuoteCreate(QuoteBase):
    pass


class QuoteUpdate(QuoteBase):
    pass


# -----------------------------
# Status Update
# -----------------------------
class QuoteStatusUpdate(CamelModel):
    status: Optional[str] = None


# -----------------------------
# Conversion (optional body)
# -----------------------------
class QuoteConvert(CamelModel):
    due_date: Optional[str] = None


# -----------------------------
# Full response model
# -----------------------------
class Quote(CamelModel):
    id: str
    number: str
    date: str
    valid_until: str
    client_name: str
    client_email: str
    vehicle_information: Dict[str, Any] = {}
    items: List[LineItem] = []
    total: float
    status: str
    created_at: datetime
    updated_at: datetime
