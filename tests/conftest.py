"""
Pytest configuration and fixtures
"""

from typing import Any, AsyncGenerator
from unittest.mock import AsyncMock, patch

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from core.database import create_db_engine, create_session_factory, init_db
from ingestion.loaders.node_loader import NodeStore

FEED_URL = "https://feed.example.com/api/v1/lightning/nodes/rankings/connectivity"


def build_response(payload: Any = None, status_code: int = 200, text: str = None) -> httpx.Response:
    """Real httpx response bound to a request against the test feed"""
    request = httpx.Request("GET", FEED_URL)
    if text is not None:
        return httpx.Response(status_code, text=text, request=request)
    return httpx.Response(status_code, json=payload, request=request)


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test_nodes.db'}"


@pytest_asyncio.fixture
async def test_engine(db_url) -> AsyncGenerator[AsyncEngine, None]:
    """Engine on a fresh SQLite file with the schema created"""
    engine = create_db_engine(db_url, pool_size=5)
    await init_db(engine)
    
    yield engine
    
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
def node_store(session_factory) -> NodeStore:
    return NodeStore(session_factory)


@pytest.fixture
def mock_feed():
    """
    Patch httpx.AsyncClient and hand back a function that sets what the
    feed answers next.
    
    respond(payload) -> 200 with a JSON body
    respond(payload, status_code=503) -> error status
    respond(text="not json") -> raw body
    respond(side_effect=...) -> exception or list of responses
    """
    with patch("httpx.AsyncClient") as mock_client:
        client = mock_client.return_value.__aenter__.return_value
        client.get = AsyncMock()
        
        def respond(payload=None, status_code=200, text=None, side_effect=None):
            if side_effect is not None:
                client.get.side_effect = side_effect
            else:
                client.get.side_effect = None
                client.get.return_value = build_response(payload, status_code, text)
            return client.get
        
        respond.client_class = mock_client
        yield respond


def make_feed_node(public_key: str, **overrides) -> dict:
    """One record as the rankings feed sends it"""
    record = {
        "publicKey": public_key,
        "alias": f"node-{public_key[-4:]}",
        "channels": 10,
        "capacity": 100_000_000,
        "firstSeen": 1609459200,
        "updatedAt": 1700000000,
        "city": {"en": "Berlin", "de": "Berlin"},
        "country": {"en": "Germany", "de": "Deutschland"},
    }
    record.update(overrides)
    return record


@pytest.fixture
def mock_feed_data():
    """Mock rankings feed payload"""
    return [
        make_feed_node(
            "03864ef025fde8fb587d989186ce6a4a186895ee44a926bfc370e2c366597a3f8f",
            alias="ACINQ",
            channels=3200,
            capacity=38957000000,
            firstSeen=1519222369,
        ),
        make_feed_node(
            "035e4ff418fc8b5554c5d9eea66396c227bd429a3251c8cbc711002ba215bfc226",
            alias="WalletOfSatoshi.com",
            channels=1800,
            capacity=123456789,
            city=None,
            country={"en": "Canada"},
        ),
    ]
