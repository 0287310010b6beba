"""
Liveness endpoint
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_class=PlainTextResponse)
async def health_check():
    """
    Liveness probe.
    
    Touches neither the database nor the upstream feed, so it answers OK
    whenever the process is serving requests.
    """
    return PlainTextResponse("OK")
