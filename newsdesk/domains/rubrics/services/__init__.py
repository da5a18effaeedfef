from .rubric_service import RubricService

__all__ = ["RubricService"]
