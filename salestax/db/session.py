"""Database engine setup.

The order table belongs to the host store; this service only opens
read sessions against it. For test runs (ENV=test) without a DATABASE_URL
an in-memory SQLite database is used.
"""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from salestax.core.config import settings

raw_url = settings.DATABASE_URL

use_sqlite_memory = settings.ENV.lower() == "test" and (not raw_url or raw_url == "sqlite:///:memory:")

if use_sqlite_memory:
    # shared cache enables multiple connections to see one database
    raw_url = "sqlite:///file:salestax_test?mode=memory&cache=shared&uri=true"
    engine = create_engine(raw_url, future=True, connect_args={"check_same_thread": False})
elif raw_url and raw_url.startswith("postgresql"):
    # Reports issue one bulk query plus one lookup per order; keep the pool small.
    engine = create_engine(
        raw_url,
        future=True,
        pool_size=5,
        max_overflow=10,
        pool_recycle=3600,
        pool_pre_ping=True,
    )
elif raw_url and raw_url.startswith("sqlite"):
    engine = create_engine(raw_url, future=True, connect_args={"check_same_thread": False})
else:
    engine = create_engine(raw_url or "sqlite:///./storage/dev.db", future=True)

SessionLocal = sessionmaker(bind=engine, class_=Session, expire_on_commit=False, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
