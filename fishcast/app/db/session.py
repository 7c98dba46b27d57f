# fishcast/app/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from fishcast.app.core.config import DATABASE_URL, SQL_ECHO


def build_engine(url: str, echo: bool = False):
    """
    Creates an engine for the given URL.
    SQLite connections are shared across threads (FastAPI runs sync routes in a pool),
    and an in-memory SQLite database is pinned to a single connection so it survives.
    """
    kwargs = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


# Create the SQLAlchemy engine
engine = build_engine(DATABASE_URL, echo=SQL_ECHO)

# autocommit=False ensures transactions are not automatically committed
# autoflush=False means objects are not automatically flushed to the database
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for declarative models
Base = declarative_base()


# Dependency to get a database session
def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        # Leave nothing half-written behind a failed request
        db.rollback()
        raise
    finally:
        db.close()
