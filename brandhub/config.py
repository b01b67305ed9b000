"""
Application configuration

Read from environment variables prefixed with BRANDHUB_ (or a local .env):

    BRANDHUB_DATABASE_URL=sqlite:///./data/db/brandhub.db
    BRANDHUB_NOTIFICATION_DELAY_SECONDS=3
    BRANDHUB_SEED_DEFAULTS=false
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BRANDHUB_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    database_url: str = Field(
        default="sqlite:///./data/db/brandhub.db",
        min_length=1,
        description="SQLAlchemy URL of the durable key/value store.",
    )
    notification_delay_seconds: float = Field(
        default=3.0,
        gt=0,
        description="How long a status notification stays visible.",
    )
    seed_defaults: bool = Field(
        default=True,
        description="Seed the built-in brands when no snapshot exists yet.",
    )
    log_file: Optional[Path] = Field(
        default=Path("server_debug.log"),
        description="Log file written next to stdout logging (None disables it).",
    )
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=1, le=65535)
