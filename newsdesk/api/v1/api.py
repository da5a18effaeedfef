"""
Version 1 API router configuration.
"""

from fastapi import APIRouter

from newsdesk.api.v1.endpoints import auth, authors, news, rubrics, tags

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
api_router.include_router(authors.router, prefix="/authors", tags=["Authors"])
api_router.include_router(news.router, prefix="/news", tags=["News"])
api_router.include_router(rubrics.router, prefix="/rubrics", tags=["Rubrics"])
api_router.include_router(tags.router, prefix="/tags", tags=["Tags"])
