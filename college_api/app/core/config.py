"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  Set the
variables before importing this module, or build a ``Settings``
instance explicitly and hand it to ``create_app``.
"""

import os
from dataclasses import dataclass

from .logging_config import DEFAULT_FORMAT


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Colleges API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty string disables the file handler.
    log_file: str = os.getenv("LOG_FILE", "")
    log_format: str = os.getenv("LOG_FORMAT", DEFAULT_FORMAT)

    # CSV file holding one row per institution.  Relative paths are
    # resolved against the current working directory.
    dataset_path: str = os.getenv("DATASET_PATH", "db/database.csv")

    # Responses are memoised for this many seconds.  ``cache_max_entries``
    # bounds memory; 0 means unbounded.
    cache_ttl_seconds: float = float(os.getenv("CACHE_TTL_SECONDS", "600"))
    cache_max_entries: int = int(os.getenv("CACHE_MAX_ENTRIES", "4096"))

    # Fixed window per client address.  Set RATE_LIMIT_REQUESTS=0 to
    # disable limiting entirely (useful behind a proxy that already
    # enforces it).
    rate_limit_requests: int = int(os.getenv("RATE_LIMIT_REQUESTS", "100"))
    rate_limit_window_seconds: float = float(os.getenv("RATE_LIMIT_WINDOW_SECONDS", str(15 * 60)))

    gzip_minimum_size: int = int(os.getenv("GZIP_MINIMUM_SIZE", "1000"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


settings = Settings()
