from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml

from . import __version__

TOKEN_ENV_VAR = "MSW_AUTH_TOKEN"

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {
        "input": "serials.txt",
        "output": "backup_report.csv",
    },
    "api": {
        "base_url": "https://api.mysonicwall.com/api/product/backupprefs",
        "timeout_sec": 30,
        "user_agent": f"sonicwall-backup-audit/{__version__}",
    },
    "runtime": {
        "log_level": "INFO",
        "progress": False,
    },
}


def _deep_update(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path: str | Path | None) -> dict[str, Any]:
    cfg = json.loads(json.dumps(DEFAULT_CONFIG))
    if not config_path:
        return cfg
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ValueError("Config root must be a mapping")
    _deep_update(cfg, payload)
    return cfg


def apply_cli_overrides(cfg: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    def _drop_none(value: Any) -> Any:
        if isinstance(value, dict):
            return {k: _drop_none(v) for k, v in value.items() if v is not None}
        if isinstance(value, list):
            return [_drop_none(v) for v in value if v is not None]
        return value

    cleaned = _drop_none(overrides)
    _deep_update(cfg, cleaned)
    return cfg


def token_from_env(environ: dict[str, str] | None = None) -> str | None:
    env = os.environ if environ is None else environ
    value = (env.get(TOKEN_ENV_VAR) or "").strip()
    return value or None
