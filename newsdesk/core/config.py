"""
Application configuration using Pydantic Settings
"""

from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Newsdesk"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = Field(default="development", description="Environment: development, staging, production")
    DEBUG: bool = Field(default=False, description="Debug mode")

    @field_validator('DEBUG', mode='before')
    @classmethod
    def validate_debug(cls, v):
        """Validate DEBUG field to handle string inputs"""
        if isinstance(v, str):
            return v.lower() in ('true', '1', 'yes', 'on')
        return bool(v)

    # Security
    SECRET_KEY: str = Field(..., description="Secret key for JWT tokens")
    JWT_ALGORITHM: str = Field(default="HS256", description="Signing algorithm for JWT tokens")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60, description="Access token expiration in minutes")

    # CORS
    ALLOWED_HOSTS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins"
    )

    @field_validator('ALLOWED_HOSTS', mode='before')
    @classmethod
    def validate_allowed_hosts(cls, v):
        """Validate ALLOWED_HOSTS field to handle JSON string inputs"""
        if isinstance(v, str):
            try:
                import json
                return json.loads(v)
            except json.JSONDecodeError:
                # If not JSON, treat as comma-separated string
                return [host.strip() for host in v.split(',')]
        return v

    # Database
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./newsdesk.db",
        description="Async SQLAlchemy database URL"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create settings instance
settings = Settings()
