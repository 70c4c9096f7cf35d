"""
Load config from config.yaml with optional env overrides.
Single source of truth for the debounce quiet period and listener wiring.
"""
from __future__ import annotations

import os
from pathlib import Path

import yaml

# Defaults if no YAML or env
_DEFAULTS = {
    "debounce": {"quiet_period_s": 0.5},
    "listeners": {"always_attach_local": False},
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _config_yaml_path() -> Path:
    """SETTINGS_STORE_CONFIG if set, else config.yaml at repo root (parent of package dir)."""
    override = os.environ.get("SETTINGS_STORE_CONFIG", "").strip()
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _load_yaml() -> dict:
    config_path = _config_yaml_path()
    if not config_path.exists():
        return {}
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_overrides() -> dict:
    overrides: dict = {}
    period = os.environ.get("SETTINGS_STORE_DEBOUNCE_S")
    if period:
        overrides.setdefault("debounce", {})["quiet_period_s"] = float(period)
    attach = os.environ.get("SETTINGS_STORE_ALWAYS_ATTACH_LOCAL")
    if attach:
        overrides.setdefault("listeners", {})["always_attach_local"] = attach.strip().lower() in _TRUE_VALUES
    return overrides


def get_config() -> dict:
    """Return merged config: defaults <- config.yaml <- env."""
    merged = _deep_merge(_DEFAULTS, _load_yaml())
    merged = _deep_merge(merged, _env_overrides())
    return merged


# Convenience accessors
def debounce_quiet_period_s() -> float:
    return float(get_config()["debounce"]["quiet_period_s"])


def always_attach_local_listener() -> bool:
    return bool(get_config()["listeners"]["always_attach_local"])
