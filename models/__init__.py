"""
SQLAlchemy ORM models for database tables.

Models:
    base: Base declarative class
    node: LightningNode, the last known state of each node in the feed

Usage:
    from models.base import Base
    from models.node import LightningNode
"""

__all__ = [
    "Base",
    "LightningNode",
]
