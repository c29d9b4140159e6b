from sqlalchemy.orm import Session

from models import Invoice, Quote
from store import Collection, store_operation


def get_dashboard(db: Session) -> dict:
    with store_operation(db, "Failed to fetch dashboard data"):
        return {
            "invoices": Collection(db, Invoice).find_many(),
            "quotes": Collection(db, Quote).find_many(),
        }
