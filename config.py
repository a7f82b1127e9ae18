"""
List Weight Engine - Configuration
"""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    BASE_DIR: Path = Path(__file__).parent
    DATA_DIR: Path = Field(default_factory=lambda: Path(__file__).parent / "data")
    DATABASE_PATH: Path = Field(default_factory=lambda: Path(__file__).parent / "data" / "rankings.db")
    DATABASE_URL: Optional[str] = Field(default=None, description="Overrides DATABASE_PATH when set")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_DIR: Optional[Path] = Field(default_factory=lambda: Path(__file__).parent / "data" / "logs")

    # Weight calculation
    DEFAULT_MEDIAN_VOTER_COUNT: int = Field(
        default=50,
        description="Median used by the voter count penalty when no list reports voters"
    )

    # Scheduler
    WEIGHT_REFRESH_INTERVAL_HOURS: int = Field(default=24)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def ensure_directories():
    """Ensure all required directories exist."""
    dirs = [settings.DATA_DIR]
    if settings.LOG_DIR:
        dirs.append(settings.LOG_DIR)
    for dir_path in dirs:
        dir_path.mkdir(parents=True, exist_ok=True)
