"""
SQLAlchemy engine and session factory.

- engine: built from settings.DATABASE_URL (PostgreSQL by default, SQLite in tests)
- SessionLocal: one session per request; every repository of that request shares it
- Base: declarative base of the tables in models.py
- get_db(): dependency yielding the request's session, closed afterwards
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from recruiting_api.config import settings

# Sync routes run in FastAPI's threadpool, so SQLite must accept other threads
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
    connect_args=connect_args,
)

# Each call to SessionLocal() gives us a fresh database session
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Base class for all our ORM models
Base = declarative_base()


def get_db():
    """
    FastAPI dependency: yields a database session, then closes it.
    Usage in a route:  def my_route(db: Session = Depends(get_db))
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
