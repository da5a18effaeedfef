"""
Tag CRUD.

Tags referenced by news are normally created through ``TagResolver``; this
service covers explicit management of the tag list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from loguru import logger
from sqlalchemy.exc import IntegrityError

from newsdesk.core.exceptions import ConflictError
from newsdesk.models import Tag
from newsdesk.models.tag import TagSchema

if TYPE_CHECKING:
    from newsdesk.core.unit_of_work import UnitOfWork


@dataclass
class TagService:
    uow: "UnitOfWork"

    async def get_all(self) -> List[TagSchema]:
        tags = await self.uow.tags.get_all()
        return [TagSchema.model_validate(tag) for tag in tags]

    async def get_by_id(self, tag_id: int) -> TagSchema:
        tag = await self.uow.tags.get_by_id(tag_id)
        return TagSchema.model_validate(tag)

    async def add(self, dto: TagSchema) -> TagSchema:
        await self._ensure_name_free(dto.name)
        tag = await self.uow.tags.add(Tag(name=dto.name))
        await self._commit_name(dto.name)
        logger.info(f"Created tag {tag.id} ({tag.name})")
        return TagSchema.model_validate(tag)

    async def update(self, tag_id: int, dto: TagSchema) -> TagSchema:
        tag = await self.uow.tags.get_by_id(tag_id)
        if dto.name != tag.name:
            await self._ensure_name_free(dto.name)
        tag.name = dto.name
        await self.uow.tags.update(tag)
        await self._commit_name(dto.name)
        logger.info(f"Renamed tag {tag_id} to {tag.name}")
        return TagSchema.model_validate(tag)

    async def delete(self, tag_id: int) -> None:
        tag = await self.uow.tags.get_by_id(tag_id)
        links = await self.uow.news_tags.get_by_tag_id(tag_id)
        for link in links:
            await self.uow.news_tags.delete(link)
        await self.uow.flush()
        await self.uow.tags.delete(tag)
        await self.uow.commit()
        logger.info(f"Deleted tag {tag_id} and {len(links)} news link(s)")

    async def _ensure_name_free(self, name: str) -> None:
        if await self.uow.tags.find_by_name(name) is not None:
            raise ConflictError(f"Tag {name!r} already exists")

    async def _commit_name(self, name: str) -> None:
        # uq_tags_name still rejects a name taken after the pre-check
        try:
            await self.uow.commit()
        except IntegrityError as exc:
            await self.uow.rollback()
            logger.warning(f"Tag name {name!r} was taken concurrently: {exc.orig}")
            raise ConflictError(f"Tag {name!r} already exists") from exc
