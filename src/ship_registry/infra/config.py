from __future__ import annotations

import os


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def log_json() -> bool:
    return os.getenv("LOG_FORMAT", "console").lower() == "json"
