"""
Author registration and CRUD.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from loguru import logger

from newsdesk.core.exceptions import ConflictError
from newsdesk.core.security import get_password_hash
from newsdesk.models import Author
from newsdesk.models.author import (
    AuthorCreateSchema,
    AuthorResponseSchema,
    AuthorUpdateSchema,
)

if TYPE_CHECKING:
    from newsdesk.core.unit_of_work import UnitOfWork


@dataclass
class AuthorService:
    uow: "UnitOfWork"

    async def get_all(self) -> List[AuthorResponseSchema]:
        authors = await self.uow.authors.get_all()
        return [AuthorResponseSchema.model_validate(author) for author in authors]

    async def get_by_id(self, author_id: int) -> AuthorResponseSchema:
        author = await self.uow.authors.get_by_id(author_id)
        return AuthorResponseSchema.model_validate(author)

    async def check_if_registered(self, email: str) -> bool:
        # Linear scan; the email column carries no unique constraint
        target = email.strip()
        authors = await self.uow.authors.get_all()
        return any(author.email == target for author in authors)

    async def add(self, dto: AuthorCreateSchema) -> Author:
        if await self.check_if_registered(dto.email):
            raise ConflictError(f"Author with email {dto.email!r} is already registered")

        author = Author(
            name=dto.name,
            email=dto.email,
            password_hash=get_password_hash(dto.password),
        )
        await self.uow.authors.add(author)
        await self.uow.commit()

        logger.info(f"Registered author {author.id} ({author.email})")
        return author

    async def update(self, author_id: int, dto: AuthorUpdateSchema) -> AuthorResponseSchema:
        author = await self.uow.authors.get_by_id(author_id)
        if dto.email != author.email and await self.check_if_registered(dto.email):
            raise ConflictError(f"Author with email {dto.email!r} is already registered")

        author.name = dto.name
        author.email = dto.email
        author.password_hash = get_password_hash(dto.password)
        await self.uow.authors.update(author)
        await self.uow.commit()

        logger.info(f"Updated author {author_id}")
        return AuthorResponseSchema.model_validate(author)

    async def delete(self, author_id: int) -> None:
        author = await self.uow.authors.get_by_id(author_id)
        written = await self.uow.news.get_all_by_author_id(author_id)
        if written:
            raise ConflictError(
                f"Author {author_id} still has {len(written)} news item(s)"
            )

        await self.uow.authors.delete(author)
        await self.uow.commit()
        logger.info(f"Deleted author {author_id}")
