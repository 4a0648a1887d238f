# File: app/core/config.py

import logging
import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    # env-provided defaults go through the validators below too
    model_config = {"validate_default": True}

    # Basic app info
    PROJECT_NAME: str = "Users API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api/go"

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Database (postgres://... URLs are accepted and mapped to psycopg)
    database_url: str = os.getenv("DATABASE_URL", "")

    # CORS
    cors_allow_origin: str = os.getenv("CORS_ALLOW_ORIGIN", "*")
    cors_allow_methods: List[str] = os.getenv(
        "CORS_ALLOW_METHODS", "POST, GET, OPTIONS, PUT, DELETE"
    )
    cors_allow_headers: List[str] = os.getenv("CORS_ALLOW_HEADERS", "Content-Type")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def split_comma_separated(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("database_url")
    @classmethod
    def use_psycopg_driver(cls, v: str) -> str:
        for scheme in ("postgres://", "postgresql://"):
            if v.startswith(scheme):
                return "postgresql+psycopg://" + v[len(scheme):]
        return v

    def setup_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.INFO),
            format=self.log_format,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
