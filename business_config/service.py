import logging
from typing import Optional

from sqlalchemy.orm import Session

from business_config.models import BusinessConfigUpdate
from models import BusinessConfig
from models.business_config import SINGLETON_ID
from store import Collection, store_operation
from utils.dates import utcnow
from utils.validation import parse_body

logger = logging.getLogger(__name__)


def get_config(db: Session) -> BusinessConfig:
    """The singleton configuration, created with defaults on first access."""
    with store_operation(db, "Failed to fetch business configuration"):
        return Collection(db, BusinessConfig).upsert_singleton(SINGLETON_ID)


def find_config(db: Session) -> Optional[BusinessConfig]:
    """Read-only lookup; None when no configuration has been stored yet."""
    with store_operation(db, "Failed to fetch business configuration"):
        return Collection(db, BusinessConfig).find_one(id=SINGLETON_ID)


def save_config(db: Session, payload) -> BusinessConfig:
    """Create or update the singleton with the supplied fields."""
    failure = "Failed to save business configuration"
    data = parse_body(BusinessConfigUpdate, payload, failure)
    values = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None
    }
    values["updated_at"] = utcnow()

    with store_operation(db, failure):
        config = Collection(db, BusinessConfig).upsert_singleton(SINGLETON_ID, values)

    logger.info("Saved business configuration (%s)", ", ".join(sorted(values)))
    return config
