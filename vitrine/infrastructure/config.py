# vitrine/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    jwt_secret: str
    jwt_audience: str
    storage_url: str
    storage_bucket: str
    storage_api_key: str
    storage_timeout: float
    rate_limit_per_minute: int
    cors_origins: tuple[str, ...]
    log_level: str
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        jwt_secret=os.environ.get("JWT_SECRET", ""),
        jwt_audience=os.environ.get("JWT_AUDIENCE", "authenticated"),
        storage_url=os.environ.get("STORAGE_URL", "").rstrip("/"),
        storage_bucket=os.environ.get("STORAGE_BUCKET", "public"),
        storage_api_key=os.environ.get("STORAGE_API_KEY", ""),
        storage_timeout=float(os.environ.get("STORAGE_TIMEOUT", "30")),
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "30")),
        cors_origins=tuple(
            o.strip()
            for o in os.environ.get("API_CORS_ORIGINS", "http://localhost:5173").split(",")
            if o.strip()
        ),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
