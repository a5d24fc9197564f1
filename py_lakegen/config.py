"""Configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from LAKEGEN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LAKEGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="console", description="Logging format (console or json)"
    )

    # Map Generation Configuration
    default_map_width: int = Field(default=50, ge=1, description="Default map width")
    default_map_height: int = Field(default=50, ge=1, description="Default map height")
    default_lake_count: int = Field(default=3, ge=0, description="Default lake count")
    default_min_lake_distance: float = Field(
        default=20.0, ge=0, description="Default minimum distance between lake centers"
    )
    default_max_depth: int = Field(default=40, ge=1, description="Default maximum depth")
    default_seed: Optional[str] = Field(
        default=None, description="Seed used when none is given on the command line"
    )


settings = Settings()
