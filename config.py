"""
Configuration management for hashdiff.
Loads settings from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


class Settings:
    """Application settings loaded from environment."""

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Documents
    DOCUMENT_ENCODING: str = os.getenv("DOCUMENT_ENCODING", "utf-8")

    # If True, loaded documents are converted to value views before diffing,
    # so nested values are snapshotted and compared by content
    FREEZE_VALUES: bool = os.getenv("FREEZE_VALUES", "True").lower() == "true"

    # Output format for the diff command: "text" or "json"
    OUTPUT_FORMAT: str = os.getenv("OUTPUT_FORMAT", "text")

    # Application
    APP_NAME: str = "hashdiff"
    APP_VERSION: str = "1.0.0"

    OUTPUT_FORMATS = ("text", "json")
    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    @classmethod
    def validate(cls) -> list[str]:
        """Validate settings. Returns list of invalid settings."""
        issues = []

        if cls.OUTPUT_FORMAT not in cls.OUTPUT_FORMATS:
            issues.append(
                f"OUTPUT_FORMAT must be one of {', '.join(cls.OUTPUT_FORMATS)}, got {cls.OUTPUT_FORMAT!r}"
            )

        if cls.LOG_LEVEL.upper() not in cls.LOG_LEVELS:
            issues.append(f"LOG_LEVEL {cls.LOG_LEVEL!r} is not a known level")

        return issues


settings = Settings()
