"""
Rubric endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from newsdesk.api.dependencies import get_current_author, get_rubric_service
from newsdesk.domains.rubrics.services import RubricService
from newsdesk.models import Author
from newsdesk.models.rubric import RubricSchema

router = APIRouter()


@router.get("/", response_model=List[RubricSchema])
async def list_rubrics(service: RubricService = Depends(get_rubric_service)):
    return await service.get_all()


@router.get("/{rubric_id}", response_model=RubricSchema)
async def get_rubric(rubric_id: int, service: RubricService = Depends(get_rubric_service)):
    return await service.get_by_id(rubric_id)


@router.post("/", response_model=RubricSchema, status_code=status.HTTP_201_CREATED)
async def create_rubric(
    payload: RubricSchema,
    current_author: Author = Depends(get_current_author),
    service: RubricService = Depends(get_rubric_service),
):
    return await service.add(payload)


@router.put("/{rubric_id}", response_model=RubricSchema)
async def update_rubric(
    rubric_id: int,
    payload: RubricSchema,
    current_author: Author = Depends(get_current_author),
    service: RubricService = Depends(get_rubric_service),
):
    return await service.update(rubric_id, payload)


@router.delete("/{rubric_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_rubric(
    rubric_id: int,
    current_author: Author = Depends(get_current_author),
    service: RubricService = Depends(get_rubric_service),
):
    await service.delete(rubric_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
