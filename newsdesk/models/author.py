"""
Author models
"""

from typing import Optional

from pydantic import Field, field_validator
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel, BaseSchema, BaseResponseSchema


class Author(BaseModel):
    """Author model"""
    __tablename__ = "authors"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name={self.name}, email={self.email})>"


# Pydantic Schemas
class AuthorCreateSchema(BaseSchema):
    """Schema for registering an author"""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(..., max_length=255, description="Login email")
    password: str = Field(..., min_length=1, description="Plain password")

    @field_validator('name', 'email')
    @classmethod
    def strip_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Value cannot be empty')
        return v.strip()

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError('Invalid email address')
        return v


class AuthorUpdateSchema(AuthorCreateSchema):
    """Schema for updating an author"""
    pass


class AuthorResponseSchema(BaseResponseSchema):
    """Schema for author responses"""

    name: str
    email: str


class LoginRequest(BaseSchema):
    email: str = Field(..., description="Login email")
    password: str = Field(..., description="Plain password")


class TokenResponse(BaseSchema):
    access_token: str
    token_type: str = "bearer"
    author: Optional[AuthorResponseSchema] = None
