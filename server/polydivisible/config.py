from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API
    api_title: str = "Polydivisible Numbers API"
    api_version: str = "1.0.0"
    api_description: str = "API for checking and generating polydivisible numbers in bases 2 to 100"

    # Server
    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=3001, ge=1, le=65535, description="Server port")
    reload: bool = False
    log_level: str = Field(default="INFO", description="Root logging level")

    # CORS
    cors_origins: List[str] = Field(default=["*"], description="Allowed CORS origins")

    # Enumeration limits
    generate_timeout_seconds: float = Field(
        default=10.0, gt=0, le=600,
        description="Wall-clock budget for one /generate request"
    )
    generate_check_interval: int = Field(
        default=4096, ge=1,
        description="Candidate digits tried between two deadline checks"
    )
    max_generate_results: int = Field(
        default=1_000_000, ge=1,
        description="Maximum sequences returned by one /generate request"
    )
    generate_rate_limit: str = Field(
        default="30/minute",
        description="Rate limit for /generate per client address (slowapi syntax)"
    )

    model_config = SettingsConfigDict(env_file=".env", validate_assignment=True)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


@lru_cache()
def get_settings():
    return Settings()
