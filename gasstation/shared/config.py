from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from gasstation.domain.services.estimate_normalizer import DIVISOR_POLICIES


load_dotenv()


DEFAULT_ORACLE_URL = "https://ethgasstation.info/json/ethgasAPI.json"
DEFAULT_CORS_ALLOW_ORIGIN_REGEX = (
    r"https?://([a-z0-9-]+\.)*(localhost|canyagasstation|canstation)"
    r"([a-z0-9.-]*)(:\d+)?"
)


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _positive_int(name: str, default: str) -> int:
    value = int(_env(name, default))
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer.")
    return value


def _positive_float(name: str, default: str) -> float:
    value = float(_env(name, default))
    if value <= 0:
        raise ValueError(f"{name} must be positive.")
    return value


@dataclass(frozen=True)
class Settings:
    oracle_url: str
    oracle_timeout_seconds: float
    oracle_divisor_policy: str
    database_url: str
    estimates_window_size: int
    estimates_max_window_size: int
    store_write_workers: int
    cors_allow_origin_regex: str
    log_level: str


def load_settings() -> Settings:
    divisor_policy = (_env("ORACLE_DIVISOR_POLICY", "oracle") or "").strip().lower()
    if divisor_policy not in DIVISOR_POLICIES:
        allowed = ", ".join(sorted(DIVISOR_POLICIES))
        raise ValueError(f"ORACLE_DIVISOR_POLICY must be one of: {allowed}.")

    window_size = _positive_int("ESTIMATES_WINDOW_SIZE", "240")
    max_window_size = _positive_int("ESTIMATES_MAX_WINDOW_SIZE", "10000")
    if window_size > max_window_size:
        raise ValueError("ESTIMATES_WINDOW_SIZE must not exceed ESTIMATES_MAX_WINDOW_SIZE.")

    return Settings(
        oracle_url=_env("ORACLE_URL", DEFAULT_ORACLE_URL),
        oracle_timeout_seconds=_positive_float("ORACLE_TIMEOUT_SECONDS", "10"),
        oracle_divisor_policy=divisor_policy,
        database_url=_env("DATABASE_URL", "sqlite:///./gas_estimates.db"),
        estimates_window_size=window_size,
        estimates_max_window_size=max_window_size,
        store_write_workers=_positive_int("STORE_WRITE_WORKERS", "4"),
        cors_allow_origin_regex=_env("CORS_ALLOW_ORIGIN_REGEX", DEFAULT_CORS_ALLOW_ORIGIN_REGEX),
        log_level=_env("LOG_LEVEL", "INFO"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
