from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    app_name: str = "Cotacao API"
    app_version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # External exchange rate API
    exchange_api_url: str = "https://economia.awesomeapi.com.br/json/last/USD-BRL"
    exchange_api_timeout_seconds: float = 0.2  # 200ms

    # Database
    database_url: str = "sqlite+aiosqlite:///./cotacoes.db"
    database_timeout_seconds: float = 0.01  # 10ms

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "COTACAO_SERVER_"
        case_sensitive = False
        extra = "ignore"

    @field_validator("exchange_api_timeout_seconds", "database_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()

