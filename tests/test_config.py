"""
Config loading (defaults <- YAML <- env) and OracleParams construction.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from chain_oracles import config
from chain_oracles.core.errors import ConfigError
from chain_oracles.providers.base import OracleParams, resolve_params


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch):
    path = tmp_path / "config.yaml"
    monkeypatch.setenv("CHAIN_ORACLES_CONFIG", str(path))
    for name in ("TOSHI", "INSIGHT", "BTCD", "BLOCKCHAINDOTINFO", "BLOCKR", "BTCDOTCOM"):
        monkeypatch.delenv(f"CHAIN_ORACLES_{name}_URL", raising=False)
    monkeypatch.delenv("CHAIN_ORACLES_HTTP_TIMEOUT", raising=False)
    monkeypatch.delenv("CHAIN_ORACLES_HTTP_RETRIES", raising=False)
    return path


class TestGetConfig:
    def test_defaults_without_yaml(self, isolated_config):
        cfg = config.get_config()
        assert cfg["oracles"]["btcdotcom"] == "https://chain.api.btc.com"
        assert config.all_providers() == ["insight", "blockchaindotinfo", "blockr", "btcdotcom"]
        assert config.multiaddr_providers() == ["blockchaindotinfo", "btcdotcom"]
        assert config.http_timeout_s() == 15.0

    def test_yaml_overrides_defaults(self, isolated_config):
        isolated_config.write_text(
            "oracles:\n  insight: https://my-insight.test/api\nhttp:\n  max_retries: 5\n",
            encoding="utf-8",
        )
        assert config.oracle_urls()["insight"] == "https://my-insight.test/api"
        assert config.oracle_urls()["blockr"] == "https://btc.blockr.io"
        assert config.retry_config().max_retries == 5

    def test_env_overrides_yaml(self, isolated_config, monkeypatch):
        isolated_config.write_text("oracles:\n  blockr: https://from-yaml.test\n", encoding="utf-8")
        monkeypatch.setenv("CHAIN_ORACLES_BLOCKR_URL", "https://from-env.test")
        monkeypatch.setenv("CHAIN_ORACLES_HTTP_RETRIES", "1")
        assert config.oracle_urls()["blockr"] == "https://from-env.test"
        assert config.retry_config().max_retries == 1

    def test_non_mapping_yaml_ignored(self, isolated_config):
        isolated_config.write_text("- just\n- a list\n", encoding="utf-8")
        assert config.get_config()["http"]["max_retries"] == 3


class TestOracleParams:
    def test_from_mapping_accepts_dashed_sink_keys(self):
        p = OracleParams.from_mapping({
            "insight": "https://i.test",
            "oracle-raw": "/tmp/raw.txt",
            "oracle-json": "/tmp/out.json",
            "unrelated": "x",
        })
        assert p.insight == "https://i.test"
        assert p.oracle_raw == "/tmp/raw.txt"
        assert p.oracle_json == "/tmp/out.json"

    def test_empty_values_are_unset(self):
        p = OracleParams.from_mapping({"insight": "", "oracle-raw": None})
        assert p.insight is None and p.oracle_raw is None

    def test_from_config_with_overrides(self, isolated_config):
        p = OracleParams.from_config(oracle_json="/tmp/x.json", blockr="https://b.test")
        assert p.blockr == "https://b.test"
        assert p.btcdotcom == "https://chain.api.btc.com"
        assert p.oracle_json == "/tmp/x.json"
        assert p.oracle_raw is None

    def test_base_url_strips_trailing_slash(self):
        assert OracleParams(blockr="https://b.test/").base_url_for("blockr") == "https://b.test"

    def test_missing_base_url(self):
        with pytest.raises(ConfigError, match="toshi"):
            OracleParams().base_url_for("toshi")

    def test_resolve_order(self, isolated_config):
        ctor = OracleParams(insight="https://ctor.test")
        call = OracleParams(insight="https://call.test")
        assert resolve_params(call, ctor) is call
        assert resolve_params(None, ctor) is ctor
        assert resolve_params({"insight": "https://map.test"}, ctor).insight == "https://map.test"
        assert resolve_params(None, None).insight == "https://insight.bitpay.com/api"
