"""Application settings."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..common.constants import CHUNK_SIZE, REJECT_FOLDER, VALID_EXTENSIONS


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MEDIA_DEDUP_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Candidate selection
    extensions: list[str] = Field(
        default_factory=lambda: list(VALID_EXTENSIONS),
        description="File suffixes eligible for comparison",
    )
    min_file_size: int = Field(
        default=0,
        ge=0,
        description="Minimum file size in bytes to consider",
    )

    # Quarantine
    reject_folder: str = Field(
        default=REJECT_FOLDER,
        min_length=1,
        description="Name of the folder receiving rejected copies",
    )

    # Hashing
    hash_workers: int = Field(
        default=1,
        ge=1,
        description="Number of threads hashing candidates (1 = sequential)",
    )
    chunk_size: int = Field(
        default=CHUNK_SIZE,
        gt=0,
        description="Read size in bytes when hashing",
    )

    # Original selection
    tie_break: Literal["first-seen", "path"] = Field(
        default="first-seen",
        description="How to pick among equally short paths",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, value: list[str]) -> list[str]:
        """Lower-case suffixes and make sure they start with a dot."""
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    @field_validator("reject_folder")
    @classmethod
    def check_reject_folder(cls, value: str) -> str:
        """Reject folder must be a single path component."""
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError(f"reject_folder must be a plain folder name, got {value!r}")
        return value


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings instance."""
    global _settings
    _settings = None
