"""
Manual import trigger
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from api.dependencies import get_context
from core.context import AppContext
from core.exceptions import NodeSyncError
from ingestion.runner import import_nodes

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/import", response_class=PlainTextResponse)
async def trigger_import(request: Request, context: AppContext = Depends(get_context)):
    """
    Import the feed now.
    
    Runs alongside the scheduler without waiting for it; the failure is
    reported to the caller and not retried.
    """
    request_id = getattr(request.state, "request_id", "-")
    logger.info(f"[{request_id}] Manual import triggered.")
    
    try:
        count = await import_nodes(context)
    except NodeSyncError as e:
        logger.error(f"[{request_id}] Manual import failed: {e}", extra={"error_context": e.to_dict()})
        return PlainTextResponse(f"Import failed: {e}", status_code=500)
    
    return PlainTextResponse(f"Imported {count} nodes")
