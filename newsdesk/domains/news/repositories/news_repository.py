"""
SQLAlchemy repository for news rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from sqlalchemy import select

from newsdesk.core.repository import SqlAlchemyRepository
from newsdesk.models import News, NewsWithTag


@dataclass
class NewsRepository(SqlAlchemyRepository[News]):
    model = News
    entity_name = "News"

    async def get_all_by_author_id(self, author_id: int) -> List[News]:
        stmt = select(News).where(News.author_id == author_id).order_by(News.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_all_by_rubric_id(self, rubric_id: int) -> List[News]:
        stmt = select(News).where(News.rubric_id == rubric_id).order_by(News.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_all_by_tag_id(self, tag_id: int) -> List[News]:
        stmt = (
            select(News)
            .join(NewsWithTag, NewsWithTag.news_id == News.id)
            .where(NewsWithTag.tag_id == tag_id)
            .order_by(News.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

