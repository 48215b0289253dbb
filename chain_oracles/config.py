"""
Load config from config.yaml with optional env overrides.
Single source of truth for oracle base URLs, curated provider lists and HTTP defaults.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Tuple

import yaml

from .providers.resilience import RetryConfig

# Defaults if no YAML or env
_DEFAULTS = {
    "oracles": {
        "toshi": "https://bitcoin.toshi.io",
        "insight": "https://insight.bitpay.com/api",
        "btcd": "http://127.0.0.1:8334",
        "blockchaindotinfo": "https://blockchain.info",
        "blockr": "https://btc.blockr.io",
        "btcdotcom": "https://chain.api.btc.com",
    },
    # toshi is gone (toshi.io shut down); btcd has no public server and no figures.
    "providers": {
        "all": ["insight", "blockchaindotinfo", "blockr", "btcdotcom"],
        "multiaddr": ["blockchaindotinfo", "btcdotcom"],
    },
    "http": {"timeout_s": 15.0, "max_retries": 3, "base_delay_s": 0.5},
}


def _config_yaml_path() -> Path:
    """config.yaml lives at repo root (parent of package dir) unless CHAIN_ORACLES_CONFIG is set."""
    override = os.environ.get("CHAIN_ORACLES_CONFIG", "").strip()
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
    for name in _DEFAULTS["oracles"]:
        url = os.environ.get(f"CHAIN_ORACLES_{name.upper()}_URL")
        if url:
            overrides.setdefault("oracles", {})[name] = url
    timeout = os.environ.get("CHAIN_ORACLES_HTTP_TIMEOUT")
    if timeout:
        overrides.setdefault("http", {})["timeout_s"] = float(timeout)
    retries = os.environ.get("CHAIN_ORACLES_HTTP_RETRIES")
    if retries:
        overrides.setdefault("http", {})["max_retries"] = int(retries)
    return overrides


def get_config() -> dict:
    """Return merged config: defaults <- config.yaml <- env."""
    merged = _deep_merge(_DEFAULTS, _load_yaml())
    merged = _deep_merge(merged, _env_overrides())
    return merged


# Convenience accessors
def oracle_urls() -> Dict[str, str]:
    return {k: str(v) for k, v in get_config()["oracles"].items() if v}


def all_providers() -> List[str]:
    return list(get_config()["providers"]["all"])


def multiaddr_providers() -> List[str]:
    return list(get_config()["providers"]["multiaddr"])


def http_timeout_s() -> float:
    return float(get_config()["http"]["timeout_s"])


def _retry_from(http: dict) -> RetryConfig:
    return RetryConfig(
        max_retries=int(http.get("max_retries", 3)),
        base_delay_s=float(http.get("base_delay_s", 0.5)),
    )


def retry_config() -> RetryConfig:
    return _retry_from(get_config()["http"])


def http_settings() -> Tuple[RetryConfig, float]:
    """Retry config and timeout from a single config read."""
    http = get_config()["http"]
    return _retry_from(http), float(http["timeout_s"])
