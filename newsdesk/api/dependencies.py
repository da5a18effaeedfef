"""
API dependencies
"""

from typing import AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.core.database import get_db
from newsdesk.core.security import decode_token
from newsdesk.core.unit_of_work import UnitOfWork
from newsdesk.domains.authors.services import AuthorService, AuthService
from newsdesk.domains.news.services import NewsService
from newsdesk.domains.rubrics.services import RubricService
from newsdesk.domains.tags.services import TagService
from newsdesk.models import Author

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


async def get_unit_of_work(
    db: AsyncSession = Depends(get_db),
) -> AsyncGenerator[UnitOfWork, None]:
    """
    Provide a request-scoped UnitOfWork over the request's session.
    """
    async with UnitOfWork(db) as uow:
        yield uow


async def get_current_author(
    token: str = Depends(oauth2_scheme),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Author:
    """
    Get current author from JWT token

    Raises:
        HTTPException: If token is invalid or the author no longer exists
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_token(token)
    if payload is None:
        raise credentials_exception

    subject = payload.get("sub")
    if subject is None:
        raise credentials_exception

    try:
        author_id = int(subject)
    except (TypeError, ValueError):
        raise credentials_exception

    author = await uow.authors.find_by_id(author_id)
    if author is None:
        raise credentials_exception
    return author


def get_news_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> NewsService:
    return NewsService(uow)


def get_author_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> AuthorService:
    return AuthorService(uow)


def get_auth_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> AuthService:
    return AuthService(uow)


def get_rubric_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> RubricService:
    return RubricService(uow)


def get_tag_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> TagService:
    return TagService(uow)
