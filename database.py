import os
import logging
from dotenv import load_dotenv

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

# Always load .env from the project folder
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"))

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./invoicing.db")

# ============================================================
# SQLALCHEMY SETUP
# ============================================================

def build_engine(url: str):
    """Create an engine, allowing SQLite to be shared across request threads."""
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


engine = build_engine(DATABASE_URL)

# SQLAlchemy session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for all SQLAlchemy models
Base = declarative_base()


def init_db(bind=None):
    """Create every collection table that does not exist yet."""
    # Register the models on Base.metadata
    import models  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Document store initialized at %s", bind.url.render_as_string(hide_password=True))


# ============================================================
# FASTAPI DEPENDENCY
# One session per request, closed automatically
# ============================================================

def get_db():
    """
    FastAPI-compatible database dependency.
    Opens a SQLAlchemy session and closes it automatically.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
