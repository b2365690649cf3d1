"""Configuration management for correction form scanning."""

import os
from dataclasses import dataclass, field
from typing import Optional


OCR_ENGINES = ("textract", "tesseract")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # S3 Configuration
    bucket_name: str = field(default_factory=lambda: os.environ.get("BUCKET_NAME", ""))
    archive_key: str = field(default_factory=lambda: os.environ.get("ARCHIVE_KEY", ""))
    archive_prefix: str = field(default_factory=lambda: os.environ.get("ARCHIVE_PREFIX", ""))

    # OCR Configuration
    ocr_engine: str = field(
        default_factory=lambda: os.environ.get("OCR_ENGINE", "textract").lower()
    )
    render_dpi: int = field(
        default_factory=lambda: int(os.environ.get("RENDER_DPI", "300"))
    )
    tessdata_dir: str = field(default_factory=lambda: os.environ.get("TESSDATA_DIR", ""))
    tesseract_lang: str = field(
        default_factory=lambda: os.environ.get("TESSERACT_LANG", "eng")
    )

    # Processing Configuration
    max_workers: int = field(
        default_factory=lambda: int(os.environ.get("MAX_WORKERS", "1"))
    )

    # Feature Flags
    legacy_date_format: bool = field(
        default_factory=lambda: os.environ.get("LEGACY_DATE_FORMAT", "false").lower() == "true"
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings instance from environment variables."""
        return cls()

    def validate(self) -> None:
        """Validate required settings are present."""
        if not self.bucket_name:
            raise ValueError("BUCKET_NAME environment variable is required")
        if self.ocr_engine not in OCR_ENGINES:
            raise ValueError(
                f"OCR_ENGINE must be one of {', '.join(OCR_ENGINES)}, got '{self.ocr_engine}'"
            )
        if self.render_dpi <= 0:
            raise ValueError("RENDER_DPI must be a positive integer")
        if self.max_workers <= 0:
            raise ValueError("MAX_WORKERS must be a positive integer")


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
