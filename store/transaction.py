import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_operation(db: Session, failure_message: str):
    """
    Wrap a unit of store work. A persistence failure is rolled back, logged
    with its traceback, and surfaced as a StoreError carrying only
    `failure_message`. Domain errors pass through untouched.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("%s: %s", failure_message, e)
        raise StoreError(failure_message) from e
