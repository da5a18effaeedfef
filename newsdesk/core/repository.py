"""
Generic SQLAlchemy repositories shared by the entity domains.

Repositories only stage changes on the session; committing is the job of
``UnitOfWork``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.core.exceptions import NotFoundError
from newsdesk.models.base import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def normalize_name(name: str) -> str:
    """Names are matched after trimming, case-sensitively."""
    return name.strip()


@dataclass
class SqlAlchemyRepository(Generic[ModelT]):
    session: AsyncSession

    model: ClassVar[Type[BaseModel]]
    entity_name: ClassVar[str]

    async def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return await self.session.get(self.model, entity_id)

    async def get_by_id(self, entity_id: int) -> ModelT:
        entity = await self.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    async def get_all(self) -> List[ModelT]:
        stmt = select(self.model).order_by(self.model.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        # Attached instances are tracked already; this re-attaches detached ones
        self.session.add(entity)
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self.session.delete(entity)


@dataclass
class NamedRepository(SqlAlchemyRepository[ModelT]):
    """Repository for entities addressable by their ``name`` column."""

    async def find_by_name(self, name: str) -> Optional[ModelT]:
        stmt = (
            select(self.model)
            .where(self.model.name == normalize_name(name))
            .order_by(self.model.id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_name(self, name: str) -> ModelT:
        entity = await self.find_by_name(name)
        if entity is None:
            raise NotFoundError(self.entity_name, normalize_name(name), field="name")
        return entity
