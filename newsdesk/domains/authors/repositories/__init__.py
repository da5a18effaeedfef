from .author_repository import AuthorRepository

__all__ = ["AuthorRepository"]
