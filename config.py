"""
Compares - Document Comparison Service
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application Info
    APP_NAME: str = "Compares"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Encoding used when it can't be detected from a filename ("json" or "yaml")
    DEFAULT_ENCODING: str = "json"

    # CORS - comma-separated list of allowed origins, or "*" for all
    # Example: "https://compares.example.com,https://admin.example.com"
    CORS_ORIGINS: str = "*"

    # Maximum request body size in bytes (10MB default)
    MAX_REQUEST_SIZE: int = 10 * 1024 * 1024

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
