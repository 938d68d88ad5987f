from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

DEFAULT_BASE_URL = "https://dummyjson.com"

_TRUE = {"true", "1", "yes", "y", "on"}
_FALSE = {"false", "0", "no", "n", "off"}

# setting -> environment variables, first one set wins
_ENV_VARS = {
    "base_url": ("DUMMYJSON_BASE_URL", "SUT_URL"),
    "timeout": ("HTTP_TIMEOUT_SECONDS",),
    "verify_tls": ("HTTP_VERIFY_TLS",),
    "actor_name": ("DUMMYJSON_ACTOR",),
    "report_json": ("REPORT_JSON_PATH",),
    "report_console": ("REPORT_CONSOLE",),
    "log_level": ("LOG_LEVEL",),
}


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    verify_tls: bool = True
    actor_name: str = "TestUser"
    report_json: Optional[str] = None
    report_console: bool = False
    log_level: str = "INFO"


def _to_bool(name: str, v: Any) -> bool:
    if isinstance(v, bool):
        return v
    low = str(v).strip().lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {name}: {v!r}")


def _to_float(name: str, v: Any) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid number for {name}: {v!r}") from None


def _to_log_level(name: str, v: Any) -> str:
    level = str(v).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid log level for {name}: {v!r}")
    return level


def _load_yaml(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {p} must contain a mapping, got {type(data).__name__}")
    return data


def load_settings(
    userdata: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Resolve settings. Precedence, highest first:
      behave userdata (-D key=value) > environment > YAML file named by
      DUMMYJSON_CONFIG > defaults.
    """
    environ = os.environ if environ is None else environ
    userdata = userdata or {}

    raw: Dict[str, Any] = {}
    config_path = userdata.get("config") or environ.get("DUMMYJSON_CONFIG")
    if config_path:
        raw.update({k: v for k, v in _load_yaml(config_path).items() if k in _ENV_VARS})

    for key, names in _ENV_VARS.items():
        for name in names:
            if environ.get(name):
                raw[key] = environ[name]
                break

    raw.update({k: v for k, v in userdata.items() if k in _ENV_VARS})

    base_url = str(raw.get("base_url", DEFAULT_BASE_URL)).strip()
    if not base_url:
        raise RuntimeError("No base URL set. Provide DUMMYJSON_BASE_URL, SUT_URL or -D base_url=...")

    report_json = raw.get("report_json")
    return Settings(
        base_url=base_url.rstrip("/"),
        timeout=_to_float("timeout", raw.get("timeout", 10.0)),
        verify_tls=_to_bool("verify_tls", raw.get("verify_tls", True)),
        actor_name=str(raw.get("actor_name", "TestUser")),
        report_json=str(report_json) if report_json else None,
        report_console=_to_bool("report_console", raw.get("report_console", False)),
        log_level=_to_log_level("log_level", raw.get("log_level", "INFO")),
    )
