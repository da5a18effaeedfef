from .author_service import AuthorService
from .auth_service import AuthService

__all__ = ["AuthorService", "AuthService"]
