"""
Repository for author entities.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select

from newsdesk.core.repository import NamedRepository
from newsdesk.models import Author


@dataclass
class AuthorRepository(NamedRepository[Author]):
    model = Author
    entity_name = "Author"

    async def find_by_email(self, email: str) -> Optional[Author]:
        stmt = (
            select(Author)
            .where(Author.email == email.strip())
            .order_by(Author.id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()
