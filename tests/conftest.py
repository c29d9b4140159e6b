import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database import Base, get_db
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def invoice_payload():
    return {
        "dueDate": "2026-11-30",
        "clientName": "Dana Whitfield",
        "clientEmail": "dana@example.com",
        "vehicleInformation": {"year": "2014", "make": "Subaru", "model": "Outback"},
        "items": [
            {"description": "Brake pads", "type": "parts", "quantity": 2, "price": 45.5, "total": 91},
            {"description": "Install", "type": "labor", "quantity": 1.5, "price": 80, "total": 120},
        ],
        "workDescription": "Replaced front pads.",
        "total": 211,
    }


@pytest.fixture
def quote_payload():
    return {
        "validUntil": "2026-12-15",
        "clientName": "Sam Ortega",
        "clientEmail": "sam@example.com",
        "items": [
            {"description": "Alternator", "type": "parts", "quantity": 2, "price": 10.00, "total": 20.00},
        ],
        "total": 20.00,
    }
