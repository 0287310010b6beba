"""
Core utilities and configuration for the Lightning node sync service.

Modules:
    config: Application configuration and environment variable management
    database: Engine, session factory and idempotent schema creation
    context: Immutable process-wide context (engine, sessions, feed URL)
    exceptions: Exception hierarchy for the import pipeline
    logging: Logging configuration

Usage:
    from core.config import settings
    from core.context import build_context
    from core.exceptions import HttpStatusError, StorageError
    from core.logging import setup_logging

Example:
    setup_logging()
    context = build_context(settings)
    await init_db(context.engine)
"""

__all__ = [
    "settings",
    "Settings",
    "AppContext",
    "build_context",
    "init_db",
    "setup_logging",
    # Exceptions
    "NodeSyncError",
    "ExtractionError",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "LoadError",
    "StorageError",
]
