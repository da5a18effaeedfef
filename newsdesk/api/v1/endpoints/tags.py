"""
Tag endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from newsdesk.api.dependencies import get_current_author, get_tag_service
from newsdesk.domains.tags.services import TagService
from newsdesk.models import Author
from newsdesk.models.tag import TagSchema

router = APIRouter()


@router.get("/", response_model=List[TagSchema])
async def list_tags(service: TagService = Depends(get_tag_service)):
    return await service.get_all()


@router.get("/{tag_id}", response_model=TagSchema)
async def get_tag(tag_id: int, service: TagService = Depends(get_tag_service)):
    return await service.get_by_id(tag_id)


@router.post("/", response_model=TagSchema, status_code=status.HTTP_201_CREATED)
async def create_tag(
    payload: TagSchema,
    current_author: Author = Depends(get_current_author),
    service: TagService = Depends(get_tag_service),
):
    return await service.add(payload)


@router.put("/{tag_id}", response_model=TagSchema)
async def update_tag(
    tag_id: int,
    payload: TagSchema,
    current_author: Author = Depends(get_current_author),
    service: TagService = Depends(get_tag_service),
):
    return await service.update(tag_id, payload)


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(
    tag_id: int,
    current_author: Author = Depends(get_current_author),
    service: TagService = Depends(get_tag_service),
):
    await service.delete(tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
