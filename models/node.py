from sqlalchemy import Column, Integer, BigInteger, String, Text, DateTime, func
from models.base import Base


class LightningNode(Base):
    """
    Last known state of a Lightning node from the rankings feed.
    
    Design:
    - One row per public_key, enforced by a unique constraint
    - Re-imports update the row in place; id and public_key never change
    - Rows are never deleted, nodes missing from a later feed keep their last state
    - city/country hold the locale->name mapping serialized as JSON text
    - imported_at is assigned by the database on every successful upsert
    """
    __tablename__ = "nodes"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    public_key = Column(String(66), nullable=False, unique=True)
    
    alias = Column(Text, nullable=True)
    channels = Column(Integer, nullable=True)
    capacity = Column(BigInteger, nullable=True)  # satoshis
    
    # Epoch seconds as reported by the feed
    first_seen = Column(BigInteger, nullable=True)
    updated_at = Column(BigInteger, nullable=True)
    
    city = Column(Text, nullable=True)
    country = Column(Text, nullable=True)
    
    imported_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    
    # AUTOINCREMENT keeps SQLite from reusing row ids
    __table_args__ = {"sqlite_autoincrement": True}
    
    def __repr__(self) -> str:
        return f"<LightningNode id={self.id} public_key={self.public_key!r}>"
