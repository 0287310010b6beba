"""
Unit tests for record normalization
"""

import json

from conftest import make_feed_node
from ingestion.transformers.normalizer import NodeNormalizer
from schemas.node import ExternalNode


class TestNodeNormalizer:
    """Test mapping of feed records onto table rows"""
    
    def setup_method(self):
        self.normalizer = NodeNormalizer()
    
    def test_normalize_maps_all_columns(self):
        node = ExternalNode.model_validate(make_feed_node("02aa", alias="alice", channels=7, capacity=42))
        
        row = self.normalizer.normalize(node)
        
        assert row["public_key"] == "02aa"
        assert row["alias"] == "alice"
        assert row["channels"] == 7
        assert row["capacity"] == 42
        assert row["first_seen"] == 1609459200
        assert row["updated_at"] == 1700000000
        assert json.loads(row["city"]) == {"en": "Berlin", "de": "Berlin"}
        assert json.loads(row["country"]) == {"en": "Germany", "de": "Deutschland"}
        assert "imported_at" not in row
        assert "id" not in row
    
    def test_missing_locations_are_stored_as_null(self):
        node = ExternalNode.model_validate(make_feed_node("02aa", city=None, country=None))
        
        row = self.normalizer.normalize(node)
        
        assert row["city"] is None
        assert row["country"] is None
    
    def test_non_ascii_names_are_kept(self):
        serialized = NodeNormalizer.serialize_locale_names({"de": "München"})
        
        assert serialized == '{"de": "München"}'
    
    def test_unserializable_mapping_degrades_to_null(self):
        """A bad mapping drops only that field"""
        serialized = NodeNormalizer.serialize_locale_names({"en": object()}, "02aa", "city")
        
        assert serialized is None
    
    def test_empty_mapping_is_kept(self):
        assert NodeNormalizer.serialize_locale_names({}) == "{}"
