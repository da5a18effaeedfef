from .tag_repository import TagRepository

__all__ = ["TagRepository"]
