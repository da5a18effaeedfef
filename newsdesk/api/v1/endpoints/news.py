"""
News endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from loguru import logger

from newsdesk.api.dependencies import get_current_author, get_news_service
from newsdesk.domains.news.services import NewsService
from newsdesk.models import Author
from newsdesk.models.news import NewsSchema

router = APIRouter()


@router.get("/", response_model=List[NewsSchema])
async def list_news(service: NewsService = Depends(get_news_service)):
    return await service.get_all()


@router.get("/by-author/{author_id}", response_model=List[NewsSchema])
async def list_news_by_author(author_id: int, service: NewsService = Depends(get_news_service)):
    return await service.get_all_by_author_id(author_id)


@router.get("/by-rubric/{rubric_id}", response_model=List[NewsSchema])
async def list_news_by_rubric(rubric_id: int, service: NewsService = Depends(get_news_service)):
    return await service.get_all_by_rubric_id(rubric_id)


@router.get("/by-tag/{tag_id}", response_model=List[NewsSchema])
async def list_news_by_tag(tag_id: int, service: NewsService = Depends(get_news_service)):
    return await service.get_all_by_tag_id(tag_id)


@router.get("/{news_id}", response_model=NewsSchema)
async def get_news_item(news_id: int, service: NewsService = Depends(get_news_service)):
    return await service.get_by_id(news_id)


@router.post("/", response_model=NewsSchema, status_code=status.HTTP_201_CREATED)
async def create_news(
    payload: NewsSchema,
    current_author: Author = Depends(get_current_author),
    service: NewsService = Depends(get_news_service),
):
    logger.info(f"Create news request from author {current_author.id}")
    return await service.add(payload)


@router.put("/{news_id}", response_model=NewsSchema)
async def update_news(
    news_id: int,
    payload: NewsSchema,
    current_author: Author = Depends(get_current_author),
    service: NewsService = Depends(get_news_service),
):
    logger.info(f"Update news request: {news_id}, author: {current_author.id}")
    return await service.update(news_id, payload)


@router.delete("/{news_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_news(
    news_id: int,
    current_author: Author = Depends(get_current_author),
    service: NewsService = Depends(get_news_service),
):
    logger.info(f"Delete news request: {news_id}, author: {current_author.id}")
    await service.delete(news_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
