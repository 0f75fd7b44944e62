from pathlib import Path
from typing import List, Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_CONTENT_TYPE = "application/msword"


class Settings(BaseSettings):
    """Configuration for the Word extraction service."""

    SERVICE_NAME: str = "DocumentAI Word Extraction Agent"
    SERVICE_VERSION: str = "1.0.0"
    APP_HOST: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("HOST", "APP_HOST"),
    )
    APP_PORT: int = Field(
        default=8989,
        validation_alias=AliasChoices("PORT", "APP_PORT"),
    )
    APP_ENV: str = "development"
    DEBUG: bool = Field(
        default=False,
        validation_alias=AliasChoices("DEBUG", "APP_DEBUG"),
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[Path] = None

    # Uploads
    MAX_UPLOAD_SIZE_MB: int = Field(default=10, gt=0, validation_alias="MAX_UPLOAD_SIZE_MB")
    UPLOAD_CHUNK_SIZE: int = Field(default=64 * 1024, gt=0)
    TEMP_DIR: Optional[Path] = None
    ALLOWED_CONTENT_TYPES: List[str] = Field(
        default=[
            DOCX_CONTENT_TYPE,
            DOC_CONTENT_TYPE,
        ]
    )

    # "text_runs" returns concatenated run text, "structured" returns the body XML
    EXTRACTION_STRATEGY: Literal["text_runs", "structured"] = "text_runs"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )

    @property
    def max_upload_size_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def allowed_content_types_set(self) -> frozenset:
        return frozenset(self.ALLOWED_CONTENT_TYPES)


settings = Settings()
