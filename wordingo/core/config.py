from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = Field(default="dev", alias="WORDINGO_ENV")
    log_level: str = Field(default="INFO", alias="WORDINGO_LOG_LEVEL")

    database_url: str = Field(
        default="sqlite+aiosqlite:///./wordingo.db",
        alias="WORDINGO_DATABASE_URL",
    )
    sql_echo: bool = Field(default=False, alias="WORDINGO_SQL_ECHO")

    # IANA zone name for daily-streak calendar days; unset means the system local zone.
    timezone: str | None = Field(default=None, alias="WORDINGO_TIMEZONE")
    max_difficulty: int = Field(default=3, ge=1, alias="WORDINGO_MAX_DIFFICULTY")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
