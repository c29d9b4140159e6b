from typing import Any, List, Optional

from sqlalchemy import select, delete as sa_delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

# Dialects with a native INSERT .. ON CONFLICT DO NOTHING
CONFLICT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class Collection:
    """
    Collection-scoped CRUD over one ORM model.

    Every write commits immediately; callers that need several writes in one
    transaction pass commit=False and call commit() themselves.
    """

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    # ------------------------------------------------------------
    # READS
    # ------------------------------------------------------------

    def find_one(self, **filters) -> Optional[Any]:
        return self.db.execute(
            select(self.model).filter_by(**filters).limit(1)
        ).scalars().first()

    def find_many(self, limit: Optional[int] = None, **filters) -> List[Any]:
        """Matching documents, newest first."""
        query = select(self.model).filter_by(**filters).order_by(self.model.created_at.desc())
        if limit is not None:
            query = query.limit(limit)
        return list(self.db.execute(query).scalars().all())

    # ------------------------------------------------------------
    # WRITES
    # ------------------------------------------------------------

    def insert(self, document, commit: bool = True):
        self.db.add(document)
        if commit:
            self.commit(document)
        return document

    def update(self, document, commit: bool = True):
        if commit:
            self.commit(document)
        return document

    def delete(self, **filters) -> bool:
        """Hard delete. Returns False when nothing matched."""
        result = self.db.execute(sa_delete(self.model).filter_by(**filters))
        self.db.commit()
        return result.rowcount > 0

    def upsert_singleton(self, key: int, values: Optional[dict] = None):
        """
        Insert the row `key` if absent, then apply `values` onto it.
        PostgreSQL and SQLite use a single INSERT .. ON CONFLICT DO NOTHING so
        two first readers cannot both create the row; other databases insert
        in a savepoint and fall back to the row a concurrent writer created.
        """
        insert = CONFLICT_INSERTS.get(self.db.get_bind().dialect.name)
        if insert is not None:
            statement = insert(self.model).values(id=key).on_conflict_do_nothing(index_elements=["id"])
            self.db.execute(statement)
        elif self.db.get(self.model, key) is None:
            try:
                with self.db.begin_nested():
                    self.db.add(self.model(id=key))
            except IntegrityError:
                pass  # created by another session since the lookup

        document = self.db.get(self.model, key)
        for field, value in (values or {}).items():
            setattr(document, field, value)
        self.commit(document)
        return document

    def commit(self, *documents):
        self.db.commit()
        for document in documents:
            self.db.refresh(document)

