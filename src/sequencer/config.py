"""Configuration management for the task sequencer."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SEQUENCER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_json: bool = Field(default=False, description="Emit JSON log lines")

    # Task snapshot
    tasks_file: Path = Field(
        default=Path("tasks.json"),
        description="JSON file holding the task snapshot to sequence",
    )
    include_completed: bool = Field(
        default=False,
        description="Include done/completed/closed tasks by default",
    )

    # MCP server
    server_name: str = Field(default="sequencer", description="MCP server name")
    server_host: str = Field(default="localhost", description="Server bind host")
    server_port: int = Field(default=3335, ge=1, le=65535, description="Server bind port")


# Global settings instance
settings = Settings()
