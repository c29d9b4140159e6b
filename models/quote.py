from sqlalchemy import Column, String, Float, DateTime, JSON
from database import Base
from utils.dates import utcnow


class Quote(Base):
    __tablename__ = "quotes"

    id = Column(String(36), primary_key=True)
    number = Column(String, unique=True, nullable=False, index=True)
    date = Column(String, nullable=False)
    valid_until = Column(String, nullable=False)
    client_name = Column(String, nullable=False)
    client_email = Column(String, nullable=False)
    vehicle_information = Column(JSON, nullable=False, default=dict)
    items = Column(JSON, nullable=False, default=list)
    total = Column(Float, nullable=False, default=0.0)
    status = Column(String, nullable=False, default="pending")
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
