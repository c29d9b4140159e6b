from sqlalchemy import Column, Integer, String, Float, DateTime
from database import Base
from utils.dates import utcnow

# The configuration is a single row pinned to this primary key
SINGLETON_ID = 1


class BusinessConfig(Base):
    __tablename__ = "business_config"

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    business_name = Column(String, nullable=False, default="")
    owner_name = Column(String, nullable=False, default="")
    address = Column(String, nullable=False, default="")
    city = Column(String, nullable=False, default="")
    state = Column(String, nullable=False, default="")
    zip_code = Column(String, nullable=False, default="")
    phone = Column(String, nullable=False, default="")
    email = Column(String, nullable=False, default="")
    hourly_rate = Column(Float, nullable=False, default=0.0)
    website = Column(String, nullable=False, default="")
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
