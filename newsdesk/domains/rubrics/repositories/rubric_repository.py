"""
Repository for rubric entities.
"""

from __future__ import annotations

from dataclasses import dataclass

from newsdesk.core.repository import NamedRepository
from newsdesk.models import Rubric


@dataclass
class RubricRepository(NamedRepository[Rubric]):
    model = Rubric
    entity_name = "Rubric"
