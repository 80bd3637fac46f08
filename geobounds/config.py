"""
Configuration management for the geobounds server.

Uses pydantic-settings for environment variable loading with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """geobounds server configuration."""

    # Server identity
    server_url: str = "http://localhost:8000"

    # Server options
    host: str = "0.0.0.0"
    port: int = 8000
    max_radius_km: float = 5000  # larger radii are rejected before reaching the kernel

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "GEOBOUNDS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
