"""
Service layer for the news domain.

Contains the tag resolver, the aggregate mapper and the news use cases.
"""

from .tag_resolver import TagResolver
from .news_mapper import NewsMapper
from .news_service import NewsService

__all__ = [
    "TagResolver",
    "NewsMapper",
    "NewsService",
]
