# python
"""
treeshell/config.py
Default configuration plus .env / TREESHELL_* environment overrides.
"""
import copy
import logging
import os
from typing import Any, Dict, Optional

from .env import load_env

DEFAULT_CONFIG: Dict[str, Any] = {
    "paths": {
        "events_file": "logs/events.jsonl",
        "scenarios_root": "scenarios",
    },
    "shell": {"hostname": "treeshell", "user": "guest", "start_path": "/", "scenario": "default"},
    "limits": {"max_output_bytes": 16384, "max_line_length": 4096},
    "logging": {"level": "WARNING"},
    "version": "0.1",
}

# env var -> (section, key, converter)
ENV_OVERRIDES = {
    "TREESHELL_SCENARIOS_ROOT": ("paths", "scenarios_root", str),
    "TREESHELL_EVENTS_FILE": ("paths", "events_file", str),
    "TREESHELL_SCENARIO": ("shell", "scenario", str),
    "TREESHELL_START_PATH": ("shell", "start_path", str),
    "TREESHELL_HOSTNAME": ("shell", "hostname", str),
    "TREESHELL_USER": ("shell", "user", str),
    "TREESHELL_MAX_OUTPUT": ("limits", "max_output_bytes", int),
    "TREESHELL_LOG_LEVEL": ("logging", "level", str),
}


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def log_level(config: Dict[str, Any]) -> int:
    name = str(config["logging"]["level"]).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {config['logging']['level']}")
    return level


def load_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Build the effective config: defaults, then environment (after loading
    .env), then `overrides`, merged section by section.
    """
    load_env()
    env_overrides: Dict[str, Dict[str, Any]] = {}
    for var, (section, key, convert) in ENV_OVERRIDES.items():
        raw = os.getenv(var)
        if raw is None or raw == "":
            continue
        try:
            value = convert(raw)
        except ValueError as exc:
            raise ValueError(f"invalid value for {var}: {raw!r}") from exc
        env_overrides.setdefault(section, {})[key] = value
    config = _merge(DEFAULT_CONFIG, env_overrides)
    if overrides:
        config = _merge(config, overrides)
    log_level(config)
    return config
