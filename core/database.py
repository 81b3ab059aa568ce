from sqlmodel import SQLModel, create_engine, Session
from typing import Generator, Iterator
from contextlib import contextmanager
import logging

from core.config import settings

logger = logging.getLogger(__name__)

# ============================================================
# ✅ Database URL setup (PostgreSQL preferred)
# ============================================================
DATABASE_URL = settings.DATABASE_URL

if not DATABASE_URL:
    # Fallback for local dev (sqlite)
    DATABASE_URL = "sqlite:///./timeledger.db"
    logger.warning("⚠️ DATABASE_URL not found — using local SQLite database.")
else:
    logger.info("✅ Using database from environment.")


def build_engine(url: str, **kwargs):
    """
    Create a SQLModel engine for the given URL.
    SQLite connections are shared across FastAPI worker threads.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        # For PostgreSQL, pool_pre_ping avoids stale connections
        kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, echo=settings.DATABASE_ECHO, **kwargs)


# ============================================================
# ✅ Create SQLModel engine
# ============================================================
engine = build_engine(DATABASE_URL)


# ============================================================
# ✅ Create tables (called at startup)
# ============================================================
def create_db_and_tables(bind=None) -> None:
    """
    Create all database tables based on SQLModel models.
    This runs automatically at app startup.
    """
    # Table models must be imported so their metadata is registered
    import models.models  # noqa: F401

    try:
        SQLModel.metadata.create_all(bind or engine)
        logger.info("✅ All database tables created successfully.")
    except Exception as e:
        logger.error(f"❌ Failed to create tables: {e}")
        raise


# ============================================================
# ✅ Dependency: FastAPI session generator
# ============================================================
def get_session() -> Generator[Session, None, None]:
    """
    Provides a SQLModel Session to FastAPI dependencies.
    Closes automatically after request completes.
    """
    with Session(engine) as session:
        yield session


# ============================================================
# ✅ Transaction scope for multi-step writes
# ============================================================
@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """
    Provides a transactional scope around a series of operations.
    Commits once at the end; any error rolls the whole unit back.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
