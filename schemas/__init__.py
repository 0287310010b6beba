"""
Pydantic schemas for data validation and serialization.

Schemas:
    node: ExternalNode, a record from the upstream rankings feed
    api: NodeResponse and the capacity/timestamp formatting used by GET /nodes

Usage:
    from schemas.node import ExternalNode
    from schemas.api import NodeResponse

Example:
    node = ExternalNode.model_validate({
        "publicKey": "02abc...",
        "alias": "my-node",
        "channels": 12,
        "capacity": 123456789,
        "firstSeen": 1609459200,
        "updatedAt": 1700000000,
    })
    assert node.public_key == "02abc..."
"""

__all__ = [
    "ExternalNode",
    "NodeResponse",
]
