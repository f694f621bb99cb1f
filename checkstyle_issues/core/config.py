"""Configuration management for checkstyle-issues."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    PROJECT_NAME: str = "checkstyle-issues"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Conversion
    EXCLUDED_FILE_SUFFIX: str = "package.html"  # Generated javadoc artifact, never a lint target

    # Package detection
    UNDEFINED_PACKAGE_NAME: str = "-"
    DETECT_PACKAGES: bool = True
    PACKAGE_DETECTION_MAX_LINES: int = 200

    model_config = {
        "env_file": ".env",
        "case_sensitive": True
    }


# Global settings instance
settings = Settings()
