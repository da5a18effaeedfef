"""
Declarative base, shared columns and base Pydantic schemas
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel as PydanticBaseModel, ConfigDict, Field
from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all ORM models"""


class BaseModel(Base):
    """Abstract model with integer primary key and audit timestamps"""
    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


# Pydantic Schemas
class BaseSchema(PydanticBaseModel):
    """Base schema reading attributes from ORM objects"""

    model_config = ConfigDict(from_attributes=True)


class BaseResponseSchema(BaseSchema):
    """Base schema for responses carrying an identifier"""

    id: Optional[int] = Field(None, description="Entity ID")
