"""
Unit of Work coordinating the entity repositories over one session.

Every repository shares the same ``AsyncSession``, so changes staged through
any of them land in the same transaction and become durable only on
``commit``. One instance is created per request scope.
"""

from __future__ import annotations

from typing import Any, Optional

from loguru import logger
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from newsdesk.domains.authors.repositories import AuthorRepository
from newsdesk.domains.news.repositories import NewsRepository, NewsTagRepository
from newsdesk.domains.rubrics.repositories import RubricRepository
from newsdesk.domains.tags.repositories import TagRepository


class UnitOfWork:
    """Repository set plus a single transaction boundary."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.authors = AuthorRepository(session)
        self.news = NewsRepository(session)
        self.rubrics = RubricRepository(session)
        self.tags = TagRepository(session)
        self.news_tags = NewsTagRepository(session)
        self._affected_rows = 0
        event.listen(session.sync_session, "after_flush", self._count_flushed)

    def _count_flushed(self, session: Session, flush_context: Any) -> None:
        # new/dirty/deleted still hold the pre-flush state inside after_flush
        modified = [obj for obj in session.dirty if session.is_modified(obj)]
        self._affected_rows += len(session.new) + len(modified) + len(session.deleted)

    async def flush(self) -> None:
        """Make staged changes visible inside the open transaction."""
        await self.session.flush()

    async def commit(self) -> int:
        """
        Persist all staged changes atomically.

        Returns:
            Number of rows inserted, updated or deleted since the last commit
        """
        await self.session.commit()
        affected, self._affected_rows = self._affected_rows, 0
        logger.debug(f"Unit of work committed, {affected} row(s) affected")
        return affected

    async def rollback(self) -> None:
        await self.session.rollback()
        self._affected_rows = 0

    def close(self) -> None:
        if event.contains(self.session.sync_session, "after_flush", self._count_flushed):
            event.remove(self.session.sync_session, "after_flush", self._count_flushed)

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc: Optional[BaseException],
        tb: Any,
    ) -> None:
        if exc_type is not None:
            await self.rollback()
        self.close()
