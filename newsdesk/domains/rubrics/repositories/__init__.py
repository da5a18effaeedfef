from .rubric_repository import RubricRepository

__all__ = ["RubricRepository"]
