"""
Persist node records with upsert logic (idempotency)
"""

import logging
from typing import Any, Dict, List, Sequence

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import StorageError
from models.node import LightningNode

logger = logging.getLogger(__name__)

_INSERT_BY_DIALECT = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class NodeStore:
    """
    Read and write the nodes table.
    
    Ensures:
    - Exactly one row per public_key on repeated imports
    - Existing rows keep their id and public_key, everything else is refreshed
    - A batch is committed all-or-nothing
    """
    
    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory
    
    def _upsert_statement(self, session: AsyncSession, row: Dict[str, Any]):
        dialect = session.get_bind().dialect.name
        try:
            insert = _INSERT_BY_DIALECT[dialect]
        except KeyError:
            raise StorageError(
                f"Upsert is not supported for dialect {dialect}",
                context={"operation": "UPSERT", "table_name": LightningNode.__tablename__}
            )
        
        stmt = insert(LightningNode).values(**row, imported_at=func.current_timestamp())
        return stmt.on_conflict_do_update(
            index_elements=["public_key"],
            set_={
                "alias": stmt.excluded.alias,
                "channels": stmt.excluded.channels,
                "capacity": stmt.excluded.capacity,
                "updated_at": stmt.excluded.updated_at,
                "city": stmt.excluded.city,
                "country": stmt.excluded.country,
                "imported_at": func.current_timestamp(),
            }
        )
    
    async def upsert_batch(self, rows: Sequence[Dict[str, Any]]) -> int:
        """
        Upsert every row inside one transaction.
        
        Args:
            rows: Normalized node rows (see NodeNormalizer)
        
        Returns:
            Number of rows written
        
        Raises:
            StorageError: Any statement or the commit failed; nothing was written
        """
        if not rows:
            return 0
        
        written = 0
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    for row in rows:
                        await session.execute(self._upsert_statement(session, row))
                        written += 1
        except SQLAlchemyError as e:
            logger.error(f"Upsert of {len(rows)} nodes rolled back after {written} statements: {e}")
            raise StorageError(
                "Failed to upsert nodes into database",
                context={
                    "operation": "UPSERT",
                    "table_name": LightningNode.__tablename__,
                    "batch_size": len(rows),
                },
                original_exception=e
            )
        
        logger.info(f"Upserted {written} nodes")
        return written
    
    async def query_all_ordered_by_capacity_desc(self) -> List[LightningNode]:
        """All stored nodes, largest capacity first, ties in row order."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(LightningNode).order_by(
                        LightningNode.capacity.desc(),
                        LightningNode.id.asc()
                    )
                )
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StorageError(
                "Failed to fetch nodes from database",
                context={"operation": "SELECT", "table_name": LightningNode.__tablename__},
                original_exception=e
            )
    
    async def count(self) -> int:
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(func.count()).select_from(LightningNode)
                )
                return result.scalar() or 0
        except SQLAlchemyError as e:
            raise StorageError(
                "Failed to count nodes",
                context={"operation": "SELECT", "table_name": LightningNode.__tablename__},
                original_exception=e
            )
