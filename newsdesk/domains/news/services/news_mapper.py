"""
Mapping between the normalized news aggregate and its flat transfer form.

Outbound, author and rubric ids are turned back into names and the tag set
is read through the ``news_tags`` join rows. Inbound, names are resolved to
ids (authors and rubrics must already exist, tags are created on demand).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Sequence, Set

from newsdesk.core.exceptions import DataIntegrityError
from newsdesk.models import News, NewsWithTag, Tag
from newsdesk.models.news import NewsSchema
from newsdesk.utils.datetime_utils import to_naive_utc

from .tag_resolver import TagResolver

if TYPE_CHECKING:
    from newsdesk.core.unit_of_work import UnitOfWork


@dataclass
class NewsMapper:
    uow: "UnitOfWork"

    def __post_init__(self) -> None:
        self.tag_resolver = TagResolver(self.uow)

    async def to_transfer(self, news: News) -> NewsSchema:
        author = await self.uow.authors.find_by_id(news.author_id)
        if author is None:
            raise DataIntegrityError(
                "Author",
                news.author_id,
                message=f"News {news.id} references missing author {news.author_id}",
            )
        rubric = await self.uow.rubrics.find_by_id(news.rubric_id)
        if rubric is None:
            raise DataIntegrityError(
                "Rubric",
                news.rubric_id,
                message=f"News {news.id} references missing rubric {news.rubric_id}",
            )
        tags = await self.tags_of(news.id)

        return NewsSchema(
            id=news.id,
            title=news.title,
            body=news.body,
            tags=self.tag_names_of(tags),
            date=news.date,
            author_name=author.name,
            rubric_name=rubric.name,
        )

    async def to_transfer_many(self, news_list: Iterable[News]) -> List[NewsSchema]:
        # No partial results: the first broken item aborts the whole batch
        return [await self.to_transfer(news) for news in news_list]

    async def from_transfer(self, dto: NewsSchema) -> News:
        # Author and rubric first, so a bad reference fails before any tag is created
        author = await self.uow.authors.get_by_name(dto.author_name)
        rubric = await self.uow.rubrics.get_by_name(dto.rubric_name)
        tags = await self.tag_resolver.resolve_or_create(dto.tags)

        return News(
            id=dto.id or None,
            title=dto.title,
            body=dto.body,
            date=to_naive_utc(dto.date),
            author_id=author.id,
            rubric_id=rubric.id,
            tags=tags,
        )

    async def from_transfer_many(self, dtos: Iterable[NewsSchema]) -> List[News]:
        return [await self.from_transfer(dto) for dto in dtos]

    async def apply_transfer(self, news: News, dto: NewsSchema) -> News:
        """Overwrite a stored news item with the transfer values, replacing its tags."""
        author = await self.uow.authors.get_by_name(dto.author_name)
        rubric = await self.uow.rubrics.get_by_name(dto.rubric_name)
        tags = await self.tag_resolver.replace_tags_for_news(news.id, dto.tags)

        news.title = dto.title
        news.body = dto.body
        news.date = to_naive_utc(dto.date)
        news.author_id = author.id
        news.rubric_id = rubric.id
        news.tags = tags
        return news

    async def link_tags(self, news: News) -> List[NewsWithTag]:
        """Stage one association row per distinct tag of the in-memory tag list."""
        if news.id is None:
            await self.uow.flush()

        links: List[NewsWithTag] = []
        seen: Set[int] = set()
        for tag in news.tags:
            if tag.id in seen:
                continue
            seen.add(tag.id)
            links.append(
                await self.uow.news_tags.add(NewsWithTag(news_id=news.id, tag_id=tag.id))
            )
        return links

    async def tags_of(self, news_id: int) -> List[Tag]:
        tags: List[Tag] = []
        for link in await self.uow.news_tags.get_by_news_id(news_id):
            tag = await self.uow.tags.find_by_id(link.tag_id)
            if tag is None:
                raise DataIntegrityError(
                    "Tag",
                    link.tag_id,
                    message=f"News {news_id} references missing tag {link.tag_id}",
                )
            tags.append(tag)
        return tags

    @staticmethod
    def tag_names_of(tags: Sequence[Tag]) -> List[str]:
        return [tag.name for tag in tags]
