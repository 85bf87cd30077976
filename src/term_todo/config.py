"""Application configuration."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TODO_")

    todo_file: str = ".todo.json"
    update_gitignore: bool = True
    atomic_writes: bool = False
    log_level: str = "WARNING"
    log_file: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    return Settings()
