"""
Repository for the news-to-tag join rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.models import NewsWithTag


@dataclass
class NewsTagRepository:
    session: AsyncSession

    async def get_all(self) -> List[NewsWithTag]:
        stmt = select(NewsWithTag).order_by(NewsWithTag.news_id, NewsWithTag.tag_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_news_id(self, news_id: int) -> List[NewsWithTag]:
        stmt = (
            select(NewsWithTag)
            .where(NewsWithTag.news_id == news_id)
            .order_by(NewsWithTag.tag_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_tag_id(self, tag_id: int) -> List[NewsWithTag]:
        stmt = (
            select(NewsWithTag)
            .where(NewsWithTag.tag_id == tag_id)
            .order_by(NewsWithTag.news_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add(self, link: NewsWithTag) -> NewsWithTag:
        self.session.add(link)
        return link

    async def delete(self, link: NewsWithTag) -> None:
        await self.session.delete(link)
