"""
Author endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from newsdesk.api.dependencies import get_author_service, get_current_author
from newsdesk.domains.authors.services import AuthorService
from newsdesk.models import Author
from newsdesk.models.author import AuthorResponseSchema, AuthorUpdateSchema

router = APIRouter()


@router.get("/", response_model=List[AuthorResponseSchema])
async def list_authors(service: AuthorService = Depends(get_author_service)):
    return await service.get_all()


@router.get("/{author_id}", response_model=AuthorResponseSchema)
async def get_author(author_id: int, service: AuthorService = Depends(get_author_service)):
    return await service.get_by_id(author_id)


@router.put("/{author_id}", response_model=AuthorResponseSchema)
async def update_author(
    author_id: int,
    payload: AuthorUpdateSchema,
    current_author: Author = Depends(get_current_author),
    service: AuthorService = Depends(get_author_service),
):
    return await service.update(author_id, payload)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    author_id: int,
    current_author: Author = Depends(get_current_author),
    service: AuthorService = Depends(get_author_service),
):
    await service.delete(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
