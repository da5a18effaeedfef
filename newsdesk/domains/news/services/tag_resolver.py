"""
Resolution of tag names into tag entities.

Tags are created lazily the first time a name is referenced. Names are
trimmed and then matched exactly (case-sensitive), so ``"AI"`` and ``"ai"``
are different tags while ``" AI "`` and ``"AI"`` are the same one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Sequence

from loguru import logger

from newsdesk.core.exceptions import InvalidInputError
from newsdesk.core.repository import normalize_name
from newsdesk.models import Tag

if TYPE_CHECKING:
    from newsdesk.core.unit_of_work import UnitOfWork

MAX_TAG_NAME_LENGTH = 100


@dataclass
class TagResolver:
    uow: "UnitOfWork"

    async def resolve_or_create(self, names: Sequence[str]) -> List[Tag]:
        """
        Map tag names to tag entities, creating the missing ones.

        New tags are staged and flushed so they carry ids, but nothing is
        committed. Repeated names resolve to a single tag; the result keeps
        the order in which names were first seen.
        """
        resolved: Dict[str, Tag] = {}
        for raw_name in names:
            name = normalize_name(raw_name)
            if not name:
                raise InvalidInputError("Tag name cannot be empty")
            if len(name) > MAX_TAG_NAME_LENGTH:
                raise InvalidInputError(
                    f"Tag name exceeds {MAX_TAG_NAME_LENGTH} characters: {name[:20]}..."
                )
            if name in resolved:
                continue

            tag = await self.uow.tags.find_by_name(name)
            if tag is None:
                tag = await self.uow.tags.add(Tag(name=name))
                await self.uow.flush()
                logger.debug(f"Created tag {name!r} with id {tag.id}")
            resolved[name] = tag

        return list(resolved.values())

    async def replace_tags_for_news(self, news_id: int, names: Sequence[str]) -> List[Tag]:
        """
        Drop every tag association of a news item and resolve the new names.

        The deletions are flushed so the replacement rows can reuse the same
        (news_id, tag_id) keys, but they stay in the caller's transaction.
        Creating the new association rows is left to ``NewsMapper.link_tags``.
        """
        links = await self.uow.news_tags.get_by_news_id(news_id)
        for link in links:
            await self.uow.news_tags.delete(link)
        await self.uow.flush()
        logger.debug(f"Removed {len(links)} tag link(s) from news {news_id}")

        return await self.resolve_or_create(names)
