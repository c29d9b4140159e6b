import time
import random
import logging

from sqlalchemy.orm import Session

from models import TestEntry
from store import Collection, store_operation
from utils.dates import utcnow

logger = logging.getLogger(__name__)

PULL_LIMIT = 3


def serialize_entry(entry: TestEntry) -> dict:
    return {
        "id": entry.id,
        "key": entry.key,
        "value": entry.value,
        "createdAt": entry.created_at.isoformat(),
    }


def store_test_entry(db: Session) -> TestEntry:
    """Write a throwaway key/value row to prove the store accepts writes."""
    now = utcnow()
    entry = TestEntry(
        key=f"test-{int(time.time() * 1000)}",
        value={
            "message": "Hello from the document store!",
            "timestamp": now.isoformat(),
            "randomNumber": random.randint(0, 999),
        },
    )
    with store_operation(db, "Error storing test data"):
        Collection(db, TestEntry).insert(entry)

    logger.info("Stored test entry %s", entry.key)
    return entry


def pull_test_entries(db: Session) -> list:
    with store_operation(db, "Error retrieving test data"):
        return Collection(db, TestEntry).find_many(limit=PULL_LIMIT)
