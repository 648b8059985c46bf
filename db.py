# db.py
# Role: Database bootstrap for the finance tracker.
#       Defines the SQLAlchemy engine, session factory, and declarative Base.
#       Also ensures the on-disk database directory exists for the default SQLite URL.

"""
Database setup for the finance tracker.

- Uses the URL from config.DATABASE_URL (SQLite at <project_root>/database/finance.db by default)
- Ensures the 'database' folder exists when the default location is used.
"""

import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

import config

if config.DATABASE_URL == config.DEFAULT_DATABASE_URL:
    os.makedirs(config.DB_DIR, exist_ok=True)  # ensure folder exists

# For SQLite, we need check_same_thread=False for FastAPI (threaded request handling)
connect_args = {"check_same_thread": False} if config.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    config.DATABASE_URL,
    connect_args=connect_args,
)

# Standard session factory used via dependency injection (see kakeibo/deps.py:get_db)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Declarative base class for ORM models
Base = declarative_base()


def init_db() -> None:
    """
    Create tables (only if they don't exist yet) and seed the default
    Kakeibo subcategories on an empty categories table.
    """
    # Imported here so models register on Base before create_all.
    import models  # noqa: F401
    from kakeibo.services.categories import seed_default_categories

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_default_categories(db)
    finally:
        db.close()
