"""
Unit tests for the display formatting used by GET /nodes
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from schemas.api import NodeResponse, format_capacity, format_first_seen


class TestFormatCapacity:
    
    @pytest.mark.parametrize(
        "sats, expected",
        [
            (123456789, "1.23456789"),
            (0, "0.00000000"),
            (1, "0.00000001"),
            (100_000_000, "1.00000000"),
            (38957000000, "389.57000000"),
            (2_100_000_000_000_000, "21000000.00000000"),
        ],
    )
    def test_sats_to_btc(self, sats, expected):
        assert format_capacity(sats) == expected
    
    def test_missing_capacity_renders_zero(self):
        assert format_capacity(None) == "0.00000000"


class TestFormatFirstSeen:
    
    def test_epoch_seconds_to_rfc3339(self):
        assert format_first_seen(1609459200) == "2021-01-01T00:00:00+00:00"
    
    def test_epoch_zero(self):
        assert format_first_seen(0) == "1970-01-01T00:00:00+00:00"
    
    @pytest.mark.parametrize("value", [10**20, -(10**20), None])
    def test_out_of_range_falls_back_to_now(self, value):
        rendered = datetime.fromisoformat(format_first_seen(value))
        
        assert rendered.tzinfo is not None
        assert abs(datetime.now(timezone.utc) - rendered) < timedelta(minutes=1)


class TestNodeResponse:
    
    def test_from_stored(self):
        stored = SimpleNamespace(
            public_key="02aa",
            alias="alice",
            capacity=123456789,
            first_seen=1609459200,
        )
        
        view = NodeResponse.from_stored(stored)
        
        assert view.model_dump() == {
            "public_key": "02aa",
            "alias": "alice",
            "capacity": "1.23456789",
            "first_seen": "2021-01-01T00:00:00+00:00",
        }
    
    def test_missing_alias_defaults_to_empty(self):
        stored = SimpleNamespace(public_key="02aa", alias=None, capacity=1, first_seen=0)
        
        assert NodeResponse.from_stored(stored).alias == ""
