from functools import lru_cache
from typing import List
import os

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Service information
    SERVICE_NAME: str = "product-service"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"

    # API settings
    API_PREFIX: str = ""
    DEBUG: bool = False

    # CORS settings, comma separated
    BACKEND_CORS_ORIGINS: str = "*"

    # Database settings
    DATABASE_URL: str = "sqlite:///./product_service.db"

    # Logging settings
    LOG_LEVEL: str = "INFO"
    ENABLE_STRUCTURED_LOGGING: bool = True

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate that database URL is properly formatted."""
        if not v.startswith(("postgresql", "mysql", "sqlite://")):
            raise ValueError("Database URL must be a valid connection string")
        return v

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from the comma separated setting."""
        return [origin.strip() for origin in self.BACKEND_CORS_ORIGINS.split(",") if origin.strip()]


def load_env_file(env_file: str = ".env") -> None:
    """
    Load environment variables from specified .env file.

    Args:
        env_file: Path to the .env file. Defaults to ".env".
    """
    env_path = os.path.join(os.getcwd(), env_file)
    if os.path.exists(env_path):
        load_dotenv(env_path)


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings with caching for efficiency.

    Returns:
        Settings: Application settings instance
    """
    load_env_file()
    return Settings()
