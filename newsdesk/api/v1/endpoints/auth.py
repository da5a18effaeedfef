"""
Authentication endpoints
"""

from fastapi import APIRouter, Depends, status
from loguru import logger

from newsdesk.api.dependencies import get_auth_service, get_author_service
from newsdesk.core.exceptions import AuthenticationError, NotFoundError
from newsdesk.domains.authors.services import AuthorService, AuthService
from newsdesk.models.author import (
    AuthorCreateSchema,
    AuthorResponseSchema,
    LoginRequest,
    TokenResponse,
)

router = APIRouter()


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    payload: AuthorCreateSchema,
    author_service: AuthorService = Depends(get_author_service),
    auth_service: AuthService = Depends(get_auth_service),
):
    logger.info(f"Register request for {payload.email}")
    author = await author_service.add(payload)
    return TokenResponse(
        access_token=auth_service.create_token(author),
        author=AuthorResponseSchema.model_validate(author),
    )


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    logger.info(f"Login request for {payload.email}")
    try:
        author = await auth_service.get_entity(payload)
    except NotFoundError as exc:
        raise AuthenticationError("Incorrect email or password") from exc
    return TokenResponse(
        access_token=auth_service.create_token(author),
        author=AuthorResponseSchema.model_validate(author),
    )
