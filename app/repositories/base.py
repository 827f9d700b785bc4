"""Generic async repository over the SQLAlchemy session.

Repositories only ``flush``; committing is left to the caller's unit of work
so that a multi-step operation either lands completely or not at all.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Base
from ..exceptions import NotFoundError, StoreError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    Find/create/update/delete access to one model.

    Args:
        db: SQLAlchemy async database session
        model: Mapped class handled by this repository
        label: Name used in NotFoundError messages (defaults to the class name)
    """

    def __init__(self, db: AsyncSession, model: Type[ModelT], label: Optional[str] = None):
        self.db = db
        self.model = model
        self.label = label or model.__name__

    async def find(self, entity_id: UUID) -> Optional[ModelT]:
        """Fetch one record by primary key, or None."""
        return await self.find_one(self.model.id == entity_id)

    async def get(self, entity_id: UUID) -> ModelT:
        """Fetch one record by primary key or raise NotFoundError."""
        entity = await self.find(entity_id)
        if entity is None:
            raise NotFoundError(self.label, entity_id)
        return entity

    async def find_one(self, *criteria: Any) -> Optional[ModelT]:
        """Fetch the single record matching all criteria, or None."""
        try:
            result = await self.db.execute(self._select(*criteria))
            return result.scalars().unique().one_or_none()
        except SQLAlchemyError as e:
            raise self._store_error("find_one", e) from e

    async def find_many(self, *criteria: Any) -> List[ModelT]:
        """Fetch every record matching all criteria."""
        try:
            result = await self.db.execute(self._select(*criteria))
            return list(result.scalars().unique().all())
        except SQLAlchemyError as e:
            raise self._store_error("find_many", e) from e

    def _select(self, *criteria: Any) -> Select:
        # Reads always reflect the store, including records already in the
        # session. Callers flush their own changes before reading again.
        return (
            select(self.model)
            .where(*criteria)
            .execution_options(populate_existing=True)
        )

    async def create(self, **values: Any) -> ModelT:
        """Insert a new record and flush so its id is available."""
        entity = self.model(**values)
        self.db.add(entity)
        await self.save(entity)
        return entity

    async def update(self, entity_id: UUID, **values: Any) -> ModelT:
        """Overwrite the given fields on an existing record."""
        entity = await self.get(entity_id)
        for field, value in values.items():
            setattr(entity, field, value)
        await self.save(entity)
        return entity

    async def save(self, entity: ModelT) -> ModelT:
        """Persist pending changes made to a loaded record."""
        await self.flush()
        return entity

    async def flush(self) -> None:
        """Write every pending change in the session to the store."""
        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            raise self._store_error("flush", e) from e

    async def delete(self, entity: ModelT) -> None:
        """Delete a loaded record."""
        try:
            await self.db.delete(entity)
            await self.db.flush()
        except SQLAlchemyError as e:
            raise self._store_error("delete", e) from e

    def _store_error(self, operation: str, exc: SQLAlchemyError) -> StoreError:
        logger.error(f"{self.label} {operation} failed: {exc}")
        return StoreError(f"{self.label} {operation} failed")
