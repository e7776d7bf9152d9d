# backend/config.py
"""
Service settings, overridable through TRANSCRIPT_* environment variables
(e.g. TRANSCRIPT_LOG_LEVEL=DEBUG, TRANSCRIPT_CORS_ORIGINS='["https://app.example"]').
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TranscriptSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TRANSCRIPT_")

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    CORS_ORIGINS: List[str] = Field(
        default=[
            "http://localhost:8080",
            "http://127.0.0.1:8080",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        description="Origins allowed by the CORS middleware"
    )
    MAX_UPLOAD_BYTES: int = Field(
        default=5 * 1024 * 1024,
        description="Largest transcript upload accepted by /parse-file"
    )
    INCLUDE_CONFIDENCE: bool = Field(
        default=False,
        description="Attach the overall confidence score to /parse responses by default"
    )
    ASSESS_VITALS: bool = Field(
        default=False,
        description="Attach the age-aware vital sign assessment to /parse responses by default"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


settings = TranscriptSettings()
