"""
Application configuration using Pydantic Settings
"""

from typing import List, Union
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # API Settings
    api_title: str = "Image Search API"
    api_description: str = "Keyword image search with paginated results"
    api_version: str = "1.0.0"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # CORS Settings
    cors_origins: Union[List[str], str] = [
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    @field_validator("cors_origins")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string to list.

        Args:
            v: Can be either a list of origins or a comma-separated string.
               If "*" is provided, allows all origins.

        Returns:
            List[str]: List of allowed origins

        Example:
            >>> parse_cors_origins("http://localhost:3000,http://localhost:8080")
            ['http://localhost:3000', 'http://localhost:8080']
            >>> parse_cors_origins("*")
            ['*']
        """
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Logging Settings
    log_level: str = "INFO"
    log_format: str = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    log_file: str = "data/app.log"

    # Image Search Settings
    pixabay_api_key: str = ""  # API key for Pixabay image search
    pixabay_base_url: str = "https://pixabay.com/api/"
    search_page_size: int = 36
    search_image_type: str = "photo"
    search_timeout: float = 10.0  # seconds, whole request

    @field_validator("search_page_size")
    @classmethod
    def check_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("search_page_size must be >= 1")
        return v

    # Security Settings
    max_concurrent_requests: int = 60  # per client IP per minute

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        # Allow unknown/legacy env vars without failing validation
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()
