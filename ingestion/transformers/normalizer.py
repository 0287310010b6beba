"""
Transform validated feed records into rows for the nodes table
"""

import json
import logging
from typing import Any, Dict, Optional

from schemas.node import ExternalNode

logger = logging.getLogger(__name__)


class NodeNormalizer:
    """
    Map an ExternalNode onto the column layout of the nodes table.
    
    Handles:
    - Field renaming (camelCase feed keys were already resolved by the schema)
    - Serialization of the city/country locale mappings to JSON text
    """
    
    def normalize(self, node: ExternalNode) -> Dict[str, Any]:
        return {
            "public_key": node.public_key,
            "alias": node.alias,
            "channels": node.channels,
            "capacity": node.capacity,
            "first_seen": node.first_seen,
            "updated_at": node.updated_at,
            "city": self.serialize_locale_names(node.city, node.public_key, "city"),
            "country": self.serialize_locale_names(node.country, node.public_key, "country"),
        }
    
    @staticmethod
    def serialize_locale_names(
        names: Optional[Dict[str, Any]],
        public_key: str = "",
        field: str = ""
    ) -> Optional[str]:
        """
        Serialize a locale mapping to JSON text.
        
        Returns None for a missing mapping or one that cannot be serialized;
        the rest of the record is still stored.
        """
        if names is None:
            return None
        try:
            return json.dumps(names, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.warning(f"Dropping unserializable {field} for {public_key}: {e}")
            return None
