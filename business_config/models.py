from typing import Optional
from datetime import datetime

from utils.schemas import CamelModel


class BusinessConfigUpdate(CamelModel):
    """Only the fields present in the request are written."""
    business_name: Optional[str] = None
    owner_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    hourly_rate: Optional[float] = None
    website: Optional[str] = None


class BusinessConfig(CamelModel):
    business_name: str = ''
    owner_name: str = ''
    address: str = ''
    city: str = ''
    state: str = ''
    zip_code: str = ''
    phone: str = ''
    email: str = ''
    hourly_rate: float = 0
    website: str = ''
    updated_at: Optional[datetime] = None
