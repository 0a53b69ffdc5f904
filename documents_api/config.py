from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = Field(...)
    HOST: str = Field("0.0.0.0")
    PORT: int = Field(3000)
    LOG_LEVEL: str = Field("INFO")
    SQL_ECHO: bool = Field(False)
    # Создавать таблицу при старте (для локальной разработки, не миграции)
    CREATE_SCHEMA: bool = Field(False)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("DATABASE_URL")
    @classmethod
    def use_async_driver(cls, v):
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """Настройки приложения (создаются один раз)"""
    return Settings()
