"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "jobportal"

    # JWT Auth (session cookie lives as long as the token)
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # bcrypt cost factor
    bcrypt_rounds: int = 10

    # Cloudinary (resume / avatar hosting)
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""

    # App
    environment: str = "development"
    frontend_url: str = "http://localhost:5173"
    log_level: str = "INFO"

    # Client
    api_base_url: str = "http://localhost:8000/api/v1"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def cookie_max_age(self) -> int:
        """Session cookie lifetime in seconds."""
        return self.jwt_expire_minutes * 60

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
