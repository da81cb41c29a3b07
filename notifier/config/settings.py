from functools import lru_cache
from typing import Optional

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Web server
    webapp_host: str = Field(default="0.0.0.0", alias="WEBAPP_HOST")
    webapp_port: int = Field(default=8080, alias="PORT", gt=0, lt=65536)
    webhook_path: str = Field(default="/webhook/notification", alias="WEBHOOK_PATH")

    # Type cache
    cache_ttl_sec: int = Field(default=3600, alias="CACHE_TTL_SEC", gt=0)
    redis_dsn: Optional[str] = Field(default=None, alias="REDIS_DSN")

    # Delivery gateway; console sender when unset
    gateway_url: Optional[HttpUrl] = Field(default=None, alias="GATEWAY_URL")
    gateway_timeout_sec: float = Field(default=10.0, alias="GATEWAY_TIMEOUT_SEC", gt=0)

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper()
        allowed = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        if level not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL={value!r}. Allowed: {sorted(allowed)}")
        return level

    @field_validator("webhook_path")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("WEBHOOK_PATH must start with '/'")
        return value


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()
