"""
Models package
"""

from .base import Base, BaseModel
from .author import Author
from .rubric import Rubric
from .tag import Tag
from .news import News, NewsWithTag

__all__ = [
    "Base",
    "BaseModel",
    "Author",
    "Rubric",
    "Tag",
    "News",
    "NewsWithTag",
]
