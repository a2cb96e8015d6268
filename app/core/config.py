# app/core/config.py
from typing import Optional
from dotenv import load_dotenv

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

load_dotenv()

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    PORT: int = Field(8000)
    LOG_LEVEL: str = Field("INFO")
    SERVICE_NAME: str = Field("bmi-evaluator")
    RATE_LIMIT_TOKENS: int = Field(10, ge=1)
    RATE_LIMIT_RATE: float = Field(1.0, gt=0)
    RATE_LIMIT_MAX_CLIENTS: int = Field(1024, ge=1)

    model_config = {
        "env_file": None,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("LOG_LEVEL")
    def known_level(cls, v):
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
