from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Accept digits in underlying roots (e.g. adjusted series "AAPL1").
    # Set false to restrict roots to uppercase letters.
    OCC_ALLOW_DIGIT_ROOTS: bool = True
    OCC_LOG_LEVEL: str = "WARNING"

    # Snake-case accessors used across the codebase.
    @property
    def allow_digit_roots(self) -> bool:
        return self.OCC_ALLOW_DIGIT_ROOTS

    @property
    def log_level(self) -> str:
        return (self.OCC_LOG_LEVEL or "WARNING").strip().upper()


def load_settings() -> Settings:
    return Settings()
