"""
Process-wide context shared by request handlers and the background scheduler
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from core.config import Settings
from core.database import create_db_engine, create_session_factory


@dataclass(frozen=True)
class AppContext:
    """Immutable handles built once at startup."""
    
    engine: AsyncEngine
    session_factory: async_sessionmaker
    source_url: str
    source_timeout: float


def build_context(config: Settings) -> AppContext:
    engine = create_db_engine(
        config.DATABASE_URL,
        pool_size=config.DB_POOL_SIZE,
        echo=config.LOG_LEVEL.upper() == "DEBUG",
    )
    return AppContext(
        engine=engine,
        session_factory=create_session_factory(engine),
        source_url=config.SOURCE_API_URL,
        source_timeout=config.SOURCE_TIMEOUT_SECONDS,
    )
