"""
Database engine and session management with SQLAlchemy async
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from models.base import Base

logger = logging.getLogger(__name__)

# Seconds a SQLite writer waits on a locked database before failing
SQLITE_BUSY_TIMEOUT = 30


def _is_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or "///" not in url)


def _expand_sqlite_path(url: str) -> str:
    """Expand ~ in file-backed SQLite URLs and make the path absolute."""
    if not url.startswith("sqlite") or _is_memory_sqlite(url):
        return url
    
    prefix_end = url.index("///") + 3
    prefix = url[:prefix_end]
    path = url[prefix_end:]
    
    return f"{prefix}{os.path.abspath(os.path.expanduser(path))}"


def create_db_engine(database_url: str, pool_size: int = 5, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine.
    
    The pool is bounded at ``pool_size`` connections with no overflow so the
    scheduler and request handlers share a small, fixed set of connections.
    """
    url = _expand_sqlite_path(database_url)
    engine_kwargs: Dict[str, Any] = {"echo": echo}
    
    if _is_memory_sqlite(url):
        # A single shared connection, otherwise every checkout sees an empty db
        engine_kwargs["poolclass"] = StaticPool
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    elif url.startswith("sqlite"):
        engine_kwargs["pool_size"] = pool_size
        engine_kwargs["max_overflow"] = 0
        engine_kwargs["connect_args"] = {"timeout": SQLITE_BUSY_TIMEOUT}
    else:
        engine_kwargs["pool_size"] = pool_size
        engine_kwargs["max_overflow"] = 0
        engine_kwargs["pool_pre_ping"] = True
    
    return create_async_engine(url, **engine_kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Create session factory"""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )


async def init_db(engine: AsyncEngine):
    """Create tables that do not exist yet. Safe to run on every startup."""
    # Register models on the metadata
    import models.node  # noqa: F401
    
    database = engine.url.database
    if engine.url.get_backend_name() == "sqlite" and database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")
