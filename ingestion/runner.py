"""
Import orchestrator: feed -> normalize -> upsert.

Both the background scheduler and the admin endpoint call into this module.
Each run owns its own session and transaction, so two runs may overlap;
whichever commits last defines the stored state. Errors propagate unchanged
and the caller decides whether to log them or report them.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.context import AppContext
from ingestion.extractors.api_extractor import NodeAPIExtractor
from ingestion.loaders.node_loader import NodeStore
from ingestion.transformers.normalizer import NodeNormalizer

logger = logging.getLogger(__name__)


class NodeImportRunner:
    """
    Orchestrate one full-refresh import of the node rankings feed.
    
    Responsibilities:
    - Fetch the feed (no retries)
    - Normalize every record into a table row
    - Upsert the whole batch in a single transaction
    """
    
    def __init__(
        self,
        session_factory: async_sessionmaker,
        timeout: float = 30.0,
        normalizer: Optional[NodeNormalizer] = None
    ):
        self.store = NodeStore(session_factory)
        self.timeout = timeout
        self.normalizer = normalizer or NodeNormalizer()
    
    async def run(self, source_url: str) -> int:
        """
        Import every node the feed currently lists.
        
        Args:
            source_url: Feed endpoint
        
        Returns:
            Number of records fetched (and therefore upserted)
        
        Raises:
            TransportError, HttpStatusError, DecodeError: From the extractor
            StorageError: From the store; nothing from this run was committed
        """
        extractor = NodeAPIExtractor(source_url, timeout=self.timeout)
        nodes = await extractor.fetch_data()
        
        rows = [self.normalizer.normalize(node) for node in nodes]
        await self.store.upsert_batch(rows)
        
        count = len(nodes)
        logger.info(f"Imported {count} nodes.")
        return count


async def import_nodes(context: AppContext) -> int:
    """Run one import with the process-wide context."""
    runner = NodeImportRunner(context.session_factory, timeout=context.source_timeout)
    return await runner.run(context.source_url)
