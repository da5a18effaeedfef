"""
Tag models
"""

from pydantic import Field, field_validator
from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel, BaseResponseSchema


class Tag(BaseModel):
    """Label shared by many news items; name is the natural key"""
    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (
        UniqueConstraint("name", name="uq_tags_name"),
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name})>"


class TagSchema(BaseResponseSchema):
    name: str = Field(..., min_length=1, max_length=100, description="Tag name")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()
