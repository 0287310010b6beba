"""
Script to run a single node import outside the API process
"""

import asyncio
import sys
import os
import logging

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from core.config import settings
from core.context import build_context
from core.database import init_db
from core.exceptions import NodeSyncError
from core.logging import setup_logging
from ingestion.loaders.node_loader import NodeStore
from ingestion.runner import import_nodes

logger = logging.getLogger(__name__)


async def run_import() -> int:
    """Import the feed once and report the stored node count"""
    context = build_context(settings)
    
    try:
        await init_db(context.engine)
        count = await import_nodes(context)
        stored = await NodeStore(context.session_factory).count()
        logger.info(f"Imported {count} nodes, {stored} nodes stored")
        return 0
    except NodeSyncError as e:
        logger.error(f"Import failed: {e}")
        return 1
    finally:
        await context.engine.dispose()


if __name__ == "__main__":
    setup_logging()
    sys.exit(asyncio.run(run_import()))
