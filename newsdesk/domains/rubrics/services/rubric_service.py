"""
Rubric CRUD.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from loguru import logger

from newsdesk.core.exceptions import ConflictError
from newsdesk.models import Rubric
from newsdesk.models.rubric import RubricSchema

if TYPE_CHECKING:
    from newsdesk.core.unit_of_work import UnitOfWork


@dataclass
class RubricService:
    uow: "UnitOfWork"

    async def get_all(self) -> List[RubricSchema]:
        rubrics = await self.uow.rubrics.get_all()
        return [RubricSchema.model_validate(rubric) for rubric in rubrics]

    async def get_by_id(self, rubric_id: int) -> RubricSchema:
        rubric = await self.uow.rubrics.get_by_id(rubric_id)
        return RubricSchema.model_validate(rubric)

    async def add(self, dto: RubricSchema) -> RubricSchema:
        await self._ensure_name_free(dto.name)
        rubric = await self.uow.rubrics.add(Rubric(name=dto.name))
        await self.uow.commit()
        logger.info(f"Created rubric {rubric.id} ({rubric.name})")
        return RubricSchema.model_validate(rubric)

    async def update(self, rubric_id: int, dto: RubricSchema) -> RubricSchema:
        rubric = await self.uow.rubrics.get_by_id(rubric_id)
        if dto.name != rubric.name:
            await self._ensure_name_free(dto.name)
        rubric.name = dto.name
        await self.uow.rubrics.update(rubric)
        await self.uow.commit()
        logger.info(f"Renamed rubric {rubric_id} to {rubric.name}")
        return RubricSchema.model_validate(rubric)

    async def delete(self, rubric_id: int) -> None:
        rubric = await self.uow.rubrics.get_by_id(rubric_id)
        filed = await self.uow.news.get_all_by_rubric_id(rubric_id)
        if filed:
            raise ConflictError(f"Rubric {rubric_id} still has {len(filed)} news item(s)")
        await self.uow.rubrics.delete(rubric)
        await self.uow.commit()
        logger.info(f"Deleted rubric {rubric_id}")

    async def _ensure_name_free(self, name: str) -> None:
        if await self.uow.rubrics.find_by_name(name) is not None:
            raise ConflictError(f"Rubric {name!r} already exists")
