"""
Repository layer for the news domain.

Repositories encapsulate database access and SQLAlchemy queries. Higher layers
reach them through ``UnitOfWork`` rather than raw sessions.
"""

from .news_repository import NewsRepository  # noqa: F401
from .news_tag_repository import NewsTagRepository  # noqa: F401
