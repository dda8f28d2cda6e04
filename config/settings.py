"""
Centralized configuration for the lead qualification engine API.

All settings are loaded from environment variables via .env file.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Brand
    brand_name: str = Field(default="Realtor Chat")

    # Tax calculator used when a request names no jurisdiction
    default_tax_calculator: str = Field(default="bc_ptt")

    # Lead scoring
    lead_score_threshold_hot: int = Field(default=70, ge=0, le=100)
    lead_score_threshold_warm: int = Field(default=50, ge=0, le=100)

    # API
    api_title: str = Field(default="Lead Qualification Engine API")
    api_version: str = Field(default="1.0.0")
    cors_origins: str = Field(default="*")

    # Logging
    log_level: str = Field(default="INFO")
    debug: bool = Field(default=False)

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
