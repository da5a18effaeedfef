"""
News use cases: CRUD over the news aggregate and the filtered listings.

Each mutating call commits the unit of work exactly once and rolls it back
on any failure, so a rejected request leaves no news, tag or join rows behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from loguru import logger
from sqlalchemy.exc import IntegrityError

from newsdesk.core.exceptions import ConflictError, NewsdeskError
from newsdesk.models.news import NewsSchema

from .news_mapper import NewsMapper

if TYPE_CHECKING:
    from newsdesk.core.unit_of_work import UnitOfWork


@dataclass
class NewsService:
    uow: "UnitOfWork"

    def __post_init__(self) -> None:
        self.mapper = NewsMapper(self.uow)

    async def get_all(self) -> List[NewsSchema]:
        news = await self.uow.news.get_all()
        return await self.mapper.to_transfer_many(news)

    async def get_by_id(self, news_id: int) -> NewsSchema:
        news = await self.uow.news.get_by_id(news_id)
        return await self.mapper.to_transfer(news)

    async def get_all_by_author_id(self, author_id: int) -> List[NewsSchema]:
        news = await self.uow.news.get_all_by_author_id(author_id)
        return await self.mapper.to_transfer_many(news)

    async def get_all_by_rubric_id(self, rubric_id: int) -> List[NewsSchema]:
        news = await self.uow.news.get_all_by_rubric_id(rubric_id)
        return await self.mapper.to_transfer_many(news)

    async def get_all_by_tag_id(self, tag_id: int) -> List[NewsSchema]:
        news = await self.uow.news.get_all_by_tag_id(tag_id)
        return await self.mapper.to_transfer_many(news)

    async def add(self, dto: NewsSchema) -> NewsSchema:
        try:
            # Identifiers are assigned by the database, never by the caller
            news = await self.mapper.from_transfer(dto.model_copy(update={"id": 0}))
            await self.uow.news.add(news)
            await self.uow.flush()
            await self.mapper.link_tags(news)
            await self.uow.commit()
        except NewsdeskError:
            await self.uow.rollback()
            raise
        except IntegrityError as exc:
            await self.uow.rollback()
            logger.exception("Failed to create news item")
            raise ConflictError(f"Failed to create news item: {exc.orig}") from exc

        logger.info(f"Created news {news.id} with {len(news.tags)} tag(s)")
        return await self.mapper.to_transfer(news)

    async def update(self, news_id: int, dto: NewsSchema) -> NewsSchema:
        try:
            news = await self.uow.news.get_by_id(news_id)
            await self.mapper.apply_transfer(news, dto)
            await self.uow.news.update(news)
            await self.mapper.link_tags(news)
            await self.uow.commit()
        except NewsdeskError:
            await self.uow.rollback()
            raise
        except IntegrityError as exc:
            await self.uow.rollback()
            logger.exception(f"Failed to update news {news_id}")
            raise ConflictError(f"Failed to update news item: {exc.orig}") from exc

        logger.info(f"Updated news {news_id}")
        return await self.mapper.to_transfer(news)

    async def delete(self, news_id: int) -> None:
        try:
            news = await self.uow.news.get_by_id(news_id)
            for link in await self.uow.news_tags.get_by_news_id(news_id):
                await self.uow.news_tags.delete(link)
            await self.uow.flush()
            await self.uow.news.delete(news)
            await self.uow.commit()
        except NewsdeskError:
            await self.uow.rollback()
            raise

        logger.info(f"Deleted news {news_id}")
