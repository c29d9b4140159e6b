from sqlalchemy import Column, String, Float, Text, DateTime, JSON
from database import Base
from utils.dates import utcnow


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True)
    number = Column(String, unique=True, nullable=False, index=True)
    date = Column(String, nullable=False)
    due_date = Column(String, nullable=False)
    client_name = Column(String, nullable=False)
    client_email = Column(String, nullable=False)
    vehicle_information = Column(JSON, nullable=False, default=dict)
    items = Column(JSON, nullable=False, default=list)
    work_description = Column(Text, nullable=False, default="")
    total = Column(Float, nullable=False, default=0.0)
    status = Column(String, nullable=False, default="pending")
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
