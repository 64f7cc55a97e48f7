import os
import warnings

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool

from zentro.config import settings


def engine_options(url: str) -> dict:
    """Connection settings for the configured backend."""
    if url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": NullPool,
        }
    return {
        "connect_args": {"connect_timeout": 10},
        "pool_size": 10,
        "max_overflow": 5,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "pool_timeout": 30,
    }


if os.getenv("TESTING") == "true" and not settings.DATABASE_URL.startswith("sqlite"):
    warnings.warn(
        "TESTING is set but DATABASE_URL is not SQLite; set "
        "DATABASE_URL=sqlite:///:memory: before importing zentro modules.",
        RuntimeWarning,
        stacklevel=2,
    )

engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
