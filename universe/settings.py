from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SPARKY_GCD_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)

    # Upper bound on how many numbers one request may carry.
    max_items: int = Field(default=100, ge=2)
    default_algorithm: Literal["euclidean", "stein"] = Field(default="euclidean")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        if v is None:
            return "INFO"
        return str(v).strip().upper() or "INFO"

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def _normalize_algorithm(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


@lru_cache()
def get_settings() -> Settings:
    return Settings()
