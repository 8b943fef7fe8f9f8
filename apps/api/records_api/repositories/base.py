"""
Base repository with common CRUD operations.
"""

from typing import TypeVar, Generic, Type
from uuid import UUID
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Persistence for one model. Services own the transaction; repositories
    only flush.

    Usage:
        class CourseRepository(BaseRepository[Course]):
            model = Course

        course = await CourseRepository(db).get_by_id(course_id)
    """

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    def _base_query(self) -> Select:
        """Rows visible to callers; override to hide soft-deleted rows."""
        return select(self.model)

    def _where(self, **filters) -> Select:
        stmt = self._base_query()
        for field, value in filters.items():
            stmt = stmt.where(getattr(self.model, field) == value)
        return stmt

    async def get_by_id(self, id: UUID) -> ModelT | None:
        return await self.get_one(id=id)

    async def get_one(self, **filters) -> ModelT | None:
        """Single visible row matching all ``filters`` (equality)."""
        result = await self.db.execute(self._where(**filters))
        return result.scalar_one_or_none()

    async def exists(self, **filters) -> bool:
        return await self.db.scalar(self._where(**filters).limit(1)) is not None

    async def create(self, **data) -> ModelT:
        entity = self.model(**data)
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def update(self, entity: ModelT, **data) -> ModelT:
        """Apply field changes; unknown fields are ignored."""
        for field, value in data.items():
            if hasattr(entity, field):
                setattr(entity, field, value)

        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def delete(self, entity: ModelT) -> None:
        """Hard delete."""
        await self.db.delete(entity)
        await self.db.flush()
