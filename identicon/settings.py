"""Настройки из переменных окружения (префикс `IDENTICON_`)."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    output_dir: str = "."
    log_level: str = "info"

    model_config = {"env_prefix": "IDENTICON_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
