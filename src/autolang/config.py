"""Configuration loading utilities for autolang."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_ENV_PREFIX = "AUTOLANG_"

# setting -> (type, default, inclusive integer bounds)
_SETTINGS: dict[str, tuple[type, str | int, tuple[int, int] | None]] = {
    "log_level": (str, "INFO", None),
    "api_host": (str, "127.0.0.1", None),
    "api_port": (int, 8000, (1, 65535)),
    "workers": (int, 1, (1, 64)),
}


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    api_host: str
    api_port: int
    workers: int


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and `AUTOLANG_*` overrides.

    Precedence is environment variable, then profile value, then built-in
    default. Every value is type- and range-checked; a bad value raises
    ``ValueError`` naming where it came from.
    """
    env = env_name or os.getenv(f"{_ENV_PREFIX}ENV", "dev")
    profile_path = (config_dir or _default_config_dir()) / f"{env}.toml"
    profile = _load_profile(profile_path)

    values: dict[str, str | int] = {}
    for key, (kind, default, bounds) in _SETTINGS.items():
        env_var = f"{_ENV_PREFIX}{key.upper()}"
        raw = os.getenv(env_var)
        if raw is not None:
            values[key] = _coerce(env_var, raw, kind, bounds)
        elif key in profile:
            values[key] = _coerce(f"{profile_path.name}: {key}", profile[key], kind, bounds)
        else:
            values[key] = default

    log_level = str(values["log_level"]).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(
            f"{_ENV_PREFIX}LOG_LEVEL must be a logging level name, got {log_level!r}"
        )

    return AppConfig(
        env=env,
        log_level=log_level,
        api_host=str(values["api_host"]),
        api_port=int(values["api_port"]),
        workers=int(values["workers"]),
    )


def configure_logging(config: AppConfig) -> None:
    """Install the root handler at the configured level."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, object]:
    if not path.exists():
        logger.debug("no config profile at %s, using defaults", path)
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)
    unknown = sorted(set(payload) - set(_SETTINGS))
    if unknown:
        logger.warning("ignoring unknown keys in %s: %s", path, ", ".join(unknown))
    logger.debug("loaded config profile %s", path)
    return {key: value for key, value in payload.items() if key in _SETTINGS}


def _coerce(
    name: str,
    value: object,
    kind: type,
    bounds: tuple[int, int] | None,
) -> str | int:
    if kind is str:
        if isinstance(value, str):
            return value
        raise ValueError(f"{name} must be a string, got type {type(value).__name__}")

    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")
    try:
        number = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc

    if bounds is not None and not bounds[0] <= number <= bounds[1]:
        raise ValueError(f"{name} must be between {bounds[0]} and {bounds[1]}, got {number}")
    return number
