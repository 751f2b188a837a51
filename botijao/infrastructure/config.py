# botijao/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    password_salt: str
    session_ttl_seconds: int
    require_email_confirmation: bool
    rate_limit_per_minute: int
    cors_origins: tuple[str, ...]
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        password_salt=os.environ.get("PASSWORD_SALT", ""),
        session_ttl_seconds=int(os.environ.get("SESSION_TTL_SECONDS", "3600")),
        require_email_confirmation=(
            os.environ.get("AUTH_REQUIRE_EMAIL_CONFIRMATION", "false").lower() == "true"
        ),
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        cors_origins=tuple(
            o.strip()
            for o in os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(",")
            if o.strip()
        ),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
