"""TaskBoard Configuration Settings."""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Database
    DATABASE_URL: Optional[str] = None

    # JWT
    JWT_SECRET_KEY: str = Field(default="dev-secret-key-change-me-before-deploying")
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440

    # Application
    APP_NAME: str = "TaskBoard"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Boards seeded on first start
    DEFAULT_BOARDS: str = "Open,In Progress,Done"

    # Rendering of Task.created_on, e.g. 05/03/2024 14:30
    DATE_FORMAT: str = "%d/%m/%Y %H:%M"

    # Search. Case-sensitive matching on SQLite relies on PRAGMA case_sensitive_like
    # (deprecated since SQLite 3.44), see database.py
    API_SEARCH_CASE_SENSITIVE: bool = True
    WEB_SEARCH_CASE_SENSITIVE: bool = False

    # Ownership rules
    API_REQUIRE_OWNER_FOR_UPDATE: bool = False
    API_REQUIRE_OWNER_FOR_DELETE: bool = False
    WEB_REQUIRE_OWNER_FOR_DELETE: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @property
    def cors_origins_list(self) -> List[str]:
        """Return the configured CORS origins as a sanitized list."""

        return _split_csv(self.CORS_ORIGINS)

    @property
    def default_boards_list(self) -> List[str]:
        return _split_csv(self.DEFAULT_BOARDS)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


def _split_csv(value: str) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


settings = Settings()
