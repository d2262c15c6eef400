"""
Cookbook settings, loaded from environment variables or a .env file.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

# Expansion recurses once per nested recipe; stay below the interpreter's
# default recursion limit of 1000 frames.
MAX_EXPANSION_DEPTH_LIMIT = 900


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Server, logging and resolver settings for the cookbook API."""

    app_name: str = "Cookbook"
    app_version: str = "1.0.0"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)

    max_expansion_depth: int = Field(
        default=200,
        ge=1,
        le=MAX_EXPANSION_DEPTH_LIMIT,
        description="Deepest chain of nested recipes a summary will follow",
    )

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8080"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    api_prefix: str = ""
    api_title: str = "Cookbook API"
    api_description: str = "In-memory cookbook of ingredients and nested recipes"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


settings = Settings()
