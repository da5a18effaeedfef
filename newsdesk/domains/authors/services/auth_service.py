"""
Credential lookup and token issuance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

from newsdesk.core.exceptions import NotFoundError
from newsdesk.core.security import create_access_token, verify_password
from newsdesk.models import Author
from newsdesk.models.author import LoginRequest

if TYPE_CHECKING:
    from newsdesk.core.unit_of_work import UnitOfWork


@dataclass
class AuthService:
    uow: "UnitOfWork"

    async def get_entity(self, login: LoginRequest) -> Author:
        """Return the author matching the credentials, or raise NotFoundError."""
        author = await self.uow.authors.find_by_email(login.email)
        if author is None or not verify_password(login.password, author.password_hash):
            logger.debug(f"No author matches credentials for {login.email}")
            raise NotFoundError(
                "Author",
                login.email,
                field="email",
                message="No author matches the supplied credentials",
            )
        return author

    def create_token(self, author: Author) -> str:
        return create_access_token(
            data={
                "sub": str(author.id),
                "email": author.email,
                "name": author.name,
            }
        )
