"""
Rubric models
"""

from pydantic import Field, field_validator
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel, BaseResponseSchema


class Rubric(BaseModel):
    """News category"""
    __tablename__ = "rubrics"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Rubric(id={self.id}, name={self.name})>"


class RubricSchema(BaseResponseSchema):
    name: str = Field(..., min_length=1, max_length=255, description="Rubric name")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()
