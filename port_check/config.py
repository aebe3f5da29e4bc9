from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

DEFAULT_TIMEOUT_SECONDS = 5
# socket deadlines are now + timeout in nanoseconds; stay well inside int64
MAX_TIMEOUT_SECONDS = 2**31 - 1
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"
    file: Optional[str] = None


@dataclass(frozen=True)
class AppConfig:
    timeout_seconds: Optional[int] = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigError(ValueError):
    pass


def _as_str(value: Any, where: str) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Expected non-empty string at {where}")
    return value


def _as_timeout(value: Any, where: str) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Expected integer at {where}")
    if value <= 0:
        raise ConfigError(f"{where} must be >0.")
    if value > MAX_TIMEOUT_SECONDS:
        raise ConfigError(f"{where} must be <={MAX_TIMEOUT_SECONDS}.")
    return value


def _as_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"Expected object/map at {where}")
    return value


def load_config(path: str) -> AppConfig:
    raw = _load_raw_config(path)
    if raw is None:
        return AppConfig()
    raw = _as_mapping(raw, "root")

    timeout_raw = raw.get("timeout")
    timeout_seconds = _as_timeout(timeout_raw, "timeout") if timeout_raw is not None else None

    logging_raw = raw.get("logging", None)
    if logging_raw is None:
        logging_raw = {}
    logging_raw = _as_mapping(logging_raw, "logging")

    level = _as_str(logging_raw.get("level", "WARNING"), "logging.level").upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of: {', '.join(_LOG_LEVELS)}.")

    log_file_raw = logging_raw.get("file")
    log_file = _as_str(log_file_raw, "logging.file") if log_file_raw is not None else None

    return AppConfig(
        timeout_seconds=timeout_seconds,
        logging=LoggingConfig(level=level, file=log_file),
    )


def _load_raw_config(path: str) -> Any:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc
    try:
        if p.suffix.lower() == ".json":
            return json.loads(data)
        return yaml.safe_load(data)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not parse config file {path}: {exc}") from exc
