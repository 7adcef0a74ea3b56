"""Application settings and configuration management."""
from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or defaults."""

    DB_PATH: str = Field(default="data/interview_reports.db")

    # Optional TTF fonts for unicode PDF output; core Helvetica otherwise.
    REPORT_FONT_REGULAR: Optional[str] = None
    REPORT_FONT_BOLD: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", validate_assignment=True, extra="ignore")


settings = Settings()
