"""Environment driven service settings."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from doc_extract.ingest.chunking import DEFAULT_CHUNK_SIZE, DEFAULT_OVERLAP, ChunkingConfig

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_HEARTBEAT_INTERVAL_SECONDS = 600.0


def _bool_from_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        LOGGER.warning("Invalid integer for %s: %s; using default %s", name, value, default)
        return default


def _float_from_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        LOGGER.warning("Invalid float for %s: %s; using default %s", name, value, default)
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    api_key: Optional[str] = None
    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int = DEFAULT_OVERLAP
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    heartbeat_enabled: bool = True
    heartbeat_interval_seconds: float = DEFAULT_HEARTBEAT_INTERVAL_SECONDS
    heartbeat_gc: bool = False
    log_dir: str = "logs"
    log_level: str = "INFO"

    @property
    def chunking(self) -> ChunkingConfig:
        return ChunkingConfig(chunk_size=self.chunk_size, overlap=self.chunk_overlap)


def load_settings() -> Settings:
    """Build :class:`Settings` from the current process environment."""

    return Settings(
        api_key=os.getenv("API_KEY") or None,
        chunk_size=_int_from_env("CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
        chunk_overlap=_int_from_env("CHUNK_OVERLAP", DEFAULT_OVERLAP),
        max_upload_bytes=_int_from_env("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        heartbeat_enabled=_bool_from_env("HEARTBEAT_ENABLED", True),
        heartbeat_interval_seconds=_float_from_env(
            "HEARTBEAT_INTERVAL_SECONDS", DEFAULT_HEARTBEAT_INTERVAL_SECONDS
        ),
        heartbeat_gc=_bool_from_env("HEARTBEAT_GC", False),
        log_dir=os.getenv("LOG_DIR", "logs"),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
