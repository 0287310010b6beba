"""
FastAPI dependencies
"""

from fastapi import Request

from core.context import AppContext
from ingestion.loaders.node_loader import NodeStore


def get_context(request: Request) -> AppContext:
    """Process-wide context attached to the app at startup"""
    return request.app.state.context


def get_store(request: Request) -> NodeStore:
    return NodeStore(get_context(request).session_factory)
