"""Configuration management for the document verification service.

Loads and validates YAML configuration with defaults for OCR, upload
intake, and extraction thresholds.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class OCRConfig(BaseModel):
    """Configuration for the Tesseract OCR provider."""

    tesseract_cmd: str | None = None
    default_lang: str = "eng"
    psm: int = 3


class IntakeConfig(BaseModel):
    """Limits applied to uploaded documents before OCR."""

    max_upload_bytes: int = 10 * 1024 * 1024
    allowed_content_types: list[str] = Field(
        default_factory=lambda: [
            "image/png",
            "image/jpeg",
            "image/jpg",
            "image/tiff",
        ]
    )


class ExtractionConfig(BaseModel):
    """Score thresholds for the line-scored field extractors."""

    school_name_min_score: float = 6.0
    university_min_score: float = 5.0
    university_scan_lines: int = 12
    course_min_score: float = 5.0


class AppConfig(BaseModel):
    """Top-level application configuration."""

    ocr: OCRConfig = Field(default_factory=OCRConfig)
    intake: IntakeConfig = Field(default_factory=IntakeConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    log_level: str = "INFO"


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.
            Defaults to configs/config.yaml.

    Returns:
        Validated application configuration.
    """
    if path is None:
        path = Path("configs/config.yaml")

    if path.exists():
        logger.info("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        return AppConfig(**raw)

    logger.info("No config file found at %s, using defaults", path)
    return AppConfig()
