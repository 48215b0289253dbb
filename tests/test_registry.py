"""
Registry and factory: name resolution, curated sets, capability flags.
"""

from __future__ import annotations

import pytest

from chain_oracles.core.errors import ConfigError
from chain_oracles.providers.base import AddressOracle, OracleParams
from chain_oracles.providers.defaults import (
    create_default_registry,
    instance,
    instance_all,
    instance_all_multiaddr,
)
from chain_oracles.providers.multi.btcdotcom import BtcDotComOracle
from chain_oracles.providers.registry import ProviderRegistry
from chain_oracles.providers.single.insight import InsightOracle
from tests.fakes.oracles import FakeHttp


class TestDefaultRegistry:
    def test_all_six_registered(self):
        registry = create_default_registry()
        assert registry.names == ["toshi", "insight", "btcd", "blockchaindotinfo", "blockr", "btcdotcom"]

    def test_every_oracle_satisfies_protocol(self):
        registry = create_default_registry()
        for oracle in registry.build():
            assert isinstance(oracle, AddressOracle)

    @pytest.mark.parametrize(
        "name, multi",
        [
            ("toshi", False),
            ("insight", False),
            ("btcd", False),
            ("blockchaindotinfo", True),
            ("blockr", True),
            ("btcdotcom", True),
        ],
    )
    def test_capability_flags(self, name, multi):
        assert instance(name).supports_multiaddr() is multi
        assert instance(name).provider_name == name

    def test_name_is_trimmed(self):
        assert isinstance(instance("  insight \n"), InsightOracle)

    def test_unknown_name_raises_config_error(self):
        with pytest.raises(ConfigError, match="Invalid api provider 'chainz'"):
            instance("chainz")

    def test_unknown_name_is_also_key_error(self):
        with pytest.raises(KeyError):
            instance("chainz")

    def test_params_validated_on_construction(self):
        with pytest.raises(ConfigError):
            instance("btcdotcom", OracleParams(insight="https://insight.test"))


class TestCuratedSets:
    def test_instance_all_excludes_toshi_and_btcd(self):
        names = [o.provider_name for o in instance_all()]
        assert names == ["insight", "blockchaindotinfo", "blockr", "btcdotcom"]

    def test_instance_all_multiaddr(self):
        oracles = instance_all_multiaddr()
        assert [o.provider_name for o in oracles] == ["blockchaindotinfo", "btcdotcom"]
        assert all(o.supports_multiaddr() for o in oracles)

    def test_curated_sets_follow_config(self, monkeypatch):
        monkeypatch.setattr("chain_oracles.config.all_providers", lambda: ["btcdotcom"])
        assert [o.provider_name for o in instance_all()] == ["btcdotcom"]


class TestProviderRegistry:
    def test_register_and_create_with_kwargs(self):
        registry = ProviderRegistry()
        registry.register("btcdotcom", BtcDotComOracle)
        http = FakeHttp()
        oracle = registry.create("btcdotcom", http_get=http)
        assert oracle.get_addresses_info([], OracleParams(btcdotcom="https://x.test")) == []
        assert "btcdotcom" in registry
        assert "insight" not in registry

    def test_creates_fresh_instances(self):
        registry = create_default_registry()
        assert registry.create("blockr") is not registry.create("blockr")

    def test_supports_multiaddr_by_name(self):
        registry = create_default_registry()
        assert registry.supports_multiaddr("blockr") is True
        assert registry.supports_multiaddr("insight") is False

    def test_supports_multiaddr_reads_class_flag_without_instantiating(self):
        built = []

        class CountingOracle(BtcDotComOracle):
            def __init__(self, *args, **kwargs):
                built.append(1)
                super().__init__(*args, **kwargs)

        registry = ProviderRegistry()
        registry.register("counting", CountingOracle)
        assert registry.supports_multiaddr("counting") is True
        assert built == []

    def test_supports_multiaddr_falls_back_to_instance_for_plain_factories(self):
        registry = ProviderRegistry()
        registry.register("wrapped", lambda **kw: InsightOracle(http_get=FakeHttp(), **kw))
        assert registry.supports_multiaddr("wrapped") is False

    def test_supports_multiaddr_unknown_name(self):
        with pytest.raises(ConfigError, match="Invalid api provider 'chainz'"):
            create_default_registry().supports_multiaddr("chainz")
