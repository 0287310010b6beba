"""
Node listing endpoint
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from api.dependencies import get_store
from core.exceptions import StorageError
from ingestion.loaders.node_loader import NodeStore
from schemas.api import NodeResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Nodes"])


async def list_view(store: NodeStore) -> List[NodeResponse]:
    """
    Stored nodes in display form, largest capacity first.
    
    Raises:
        StorageError: The nodes could not be read
    """
    nodes = await store.query_all_ordered_by_capacity_desc()
    return [NodeResponse.from_stored(node) for node in nodes]


@router.get("/nodes", response_model=List[NodeResponse])
async def get_nodes(request: Request, store: NodeStore = Depends(get_store)):
    """Every stored node with capacity in BTC and first_seen as RFC-3339"""
    request_id = getattr(request.state, "request_id", "-")
    try:
        nodes = await list_view(store)
    except StorageError as e:
        logger.error(f"[{request_id}] Error fetching nodes: {e}")
        return PlainTextResponse(
            "Internal server error while fetching nodes.",
            status_code=500
        )
    
    logger.info(f"[{request_id}] GET /nodes returned {len(nodes)} nodes")
    return nodes
