# riceboard/config.py

from typing import Optional
from pathlib import Path
import logging
import sys

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from pythonjsonlogger.json import JsonFormatter

load_dotenv()

# Custom JSON formatter that excludes null/None fields
class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that only includes fields with non-None values."""

    def add_fields(self, log_record, record, message_dict):
        """Override to filter out None values before adding to JSON output."""
        super().add_fields(log_record, record, message_dict)

        # Remove keys with None values
        log_record_copy = dict(log_record)
        for key, value in log_record_copy.items():
            if value is None:
                del log_record[key]

def setup_json_logging(log_level: int = logging.INFO) -> None:
    """Initialize JSON logging configuration for the application."""
    handler = logging.StreamHandler(sys.stdout)

    # JSON formatter with common fields used across the application
    formatter = CustomJsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s "
        "%(feature_id)s %(source_kind)s %(mode)s %(row)s "
        "%(count)s %(total)s %(errors)s "
        "%(warning)s %(reason)s %(overall_score)s %(key)s %(version)s"
    )

    handler.setFormatter(formatter)

    root_logger = logging.getLogger("riceboard")
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers = []

    root_logger.addHandler(handler)

    # Prevent propagation to avoid duplicate logs
    root_logger.propagate = False


BASE_DIR = Path(__file__).resolve().parent.parent  # project root folder


class Settings(BaseSettings):
    # App
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Local persistence (single-user state snapshot)
    DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'riceboard.db'}"
    STATE_STORAGE_KEY: str = "rice-prioritization-state"
    STATE_SCHEMA_VERSION: int = 1

    # Presentation
    SCORE_DISPLAY_DECIMALS: int = 2

    # Import rules; None means no cap
    IMPORT_MAX_ROWS: Optional[int] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    @field_validator("STATE_SCHEMA_VERSION")
    @classmethod
    def validate_schema_version(cls, v: int) -> int:
        if v < 1:
            raise ValueError("STATE_SCHEMA_VERSION must be >= 1")
        return v

    @field_validator("SCORE_DISPLAY_DECIMALS")
    @classmethod
    def validate_display_decimals(cls, v: int) -> int:
        if v < 0:
            raise ValueError("SCORE_DISPLAY_DECIMALS must be >= 0")
        return v

    @field_validator("IMPORT_MAX_ROWS")
    @classmethod
    def validate_import_max_rows(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError("IMPORT_MAX_ROWS must be a positive integer when set")
        return v


settings = Settings()
