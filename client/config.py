"""Client configuration."""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client settings."""

    # Quote server
    server_url: str = "http://localhost:8080/cotacao"
    request_timeout_seconds: float = 0.3  # 300ms

    # Output
    output_file: str = "cotacao.txt"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "COTACAO_CLIENT_"
        extra = "ignore"

    @field_validator("request_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
