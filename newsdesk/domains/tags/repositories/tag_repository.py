"""
Repository for tag entities.
"""

from __future__ import annotations

from dataclasses import dataclass

from newsdesk.core.repository import NamedRepository
from newsdesk.models import Tag


@dataclass
class TagRepository(NamedRepository[Tag]):
    model = Tag
    entity_name = "Tag"
