"""
Pydantic schemas for API responses
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

SATS_PER_BTC_EXPONENT = 8


def format_capacity(capacity_sats: Optional[int]) -> str:
    """Render satoshis as BTC with exactly 8 fractional digits."""
    btc = Decimal(capacity_sats or 0).scaleb(-SATS_PER_BTC_EXPONENT)
    return f"{btc:.8f}"


def format_first_seen(epoch_seconds: Optional[int]) -> str:
    """
    Render epoch seconds as an RFC-3339 UTC timestamp.
    
    Values outside the representable range fall back to the current time
    so one bad row never fails the whole listing.
    """
    try:
        ts = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError, TypeError):
        ts = datetime.now(timezone.utc)
    return ts.isoformat()


class NodeResponse(BaseModel):
    """Node as served by GET /nodes"""
    public_key: str
    alias: str = ""
    capacity: str = Field(..., description="Capacity in BTC, 8 decimal places")
    first_seen: str = Field(..., description="RFC-3339 timestamp (UTC)")
    
    @classmethod
    def from_stored(cls, node) -> "NodeResponse":
        return cls(
            public_key=node.public_key,
            alias=node.alias or "",
            capacity=format_capacity(node.capacity),
            first_seen=format_first_seen(node.first_seen),
        )
    
    class Config:
        json_schema_extra = {
            "example": {
                "public_key": "03864ef025fde8fb587d989186ce6a4a186895ee44a926bfc370e2c366597a3f8f",
                "alias": "ACINQ",
                "capacity": "389.57000000",
                "first_seen": "2018-02-21T14:12:49+00:00"
            }
        }
