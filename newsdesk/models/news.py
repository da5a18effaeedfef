"""
News aggregate models: the news row, its tag join rows and the flat transfer schema
"""

from typing import List, Optional
from datetime import datetime

from pydantic import Field, field_validator
from sqlalchemy import String, Text, DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, reconstructor

from .base import Base, BaseModel, BaseSchema
from .tag import Tag
from newsdesk.utils.datetime_utils import utc_now_naive


class News(BaseModel):
    """
    News row with foreign keys to its author and rubric.

    ``tags`` is an in-memory list populated by the news mapper; the persisted
    tag set lives in ``news_tags`` and is never loaded into this attribute.
    """
    __tablename__ = "news"

    title: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="News title"
    )
    body: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Full text of the news item"
    )
    date: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        comment="Publication date"
    )
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("authors.id"),
        nullable=False,
        comment="Author who wrote the news item"
    )
    rubric_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("rubrics.id"),
        nullable=False,
        comment="Rubric the news item is filed under"
    )

    __table_args__ = (
        Index('idx_news_author_id', 'author_id'),
        Index('idx_news_rubric_id', 'rubric_id'),
        Index('idx_news_date', 'date'),
    )

    def __init__(self, *, tags: Optional[List[Tag]] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.tags = list(tags or [])

    @reconstructor
    def _init_on_load(self) -> None:
        self.tags = []

    def __repr__(self) -> str:
        return f"<News(id={self.id}, title={self.title[:50]!r}, author_id={self.author_id})>"


class NewsWithTag(Base):
    """Join row linking one news item to one tag"""
    __tablename__ = "news_tags"

    news_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("news.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    )

    __table_args__ = (
        Index('idx_news_tags_tag_id', 'tag_id'),
    )

    def __repr__(self) -> str:
        return f"<NewsWithTag(news_id={self.news_id}, tag_id={self.tag_id})>"


# Pydantic Schemas
class NewsSchema(BaseSchema):
    """Flat news representation exchanged with API callers"""

    id: int = Field(0, description="News ID, 0 for items not yet stored")
    title: str = Field(..., max_length=500, description="News title")
    body: str = Field("", description="Full text")
    tags: List[str] = Field(default_factory=list, description="Tag names")
    date: datetime = Field(default_factory=utc_now_naive, description="Publication date")
    author_name: str = Field(..., description="Name of an existing author")
    rubric_name: str = Field(..., description="Name of an existing rubric")

    @field_validator('title', 'author_name', 'rubric_name')
    @classmethod
    def validate_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Value cannot be empty')
        return v.strip()

    @field_validator('tags', mode='before')
    @classmethod
    def validate_tags(cls, v):
        if v is None:
            return []
        return v
