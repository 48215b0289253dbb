"""
CLI: lookup output formats, per-oracle failure handling, provider listing.
"""

from __future__ import annotations

import json

import pytest

from chain_oracles.cli import list_providers, lookup
from chain_oracles.cli.main import main as cli_main
from chain_oracles.core.errors import TransportError
from chain_oracles.providers.base import AddressRecord


class _StubOracle:
    def __init__(self, name, fail=False):
        self._name = name
        self._fail = fail
        self.seen = None

    @property
    def provider_name(self):
        return self._name

    def supports_multiaddr(self):
        return True

    def get_addresses_info(self, addresses, params=None):
        self.seen = (list(addresses), params)
        if self._fail:
            raise TransportError("Got unexpected response code 500", status_code=500)
        return [AddressRecord.unused(a) for a in addresses]


class TestLookup:
    def test_json_output_single_provider(self, monkeypatch, capsys):
        stub = _StubOracle("btcdotcom")
        monkeypatch.setattr(lookup, "instance", lambda name, params: stub)
        rc = lookup.main(["1AAA", "1BBB", "--provider", "btcdotcom", "--oracle-raw", "/tmp/r.txt"])
        assert rc == 0
        out = json.loads(capsys.readouterr().out)
        assert [r["address"] for r in out["btcdotcom"]] == ["1AAA", "1BBB"]
        assert stub.seen[1].oracle_raw == "/tmp/r.txt"

    def test_failed_oracle_reported_and_next_tried(self, monkeypatch, capsys):
        oracles = [_StubOracle("insight", fail=True), _StubOracle("blockr")]
        monkeypatch.setattr(lookup, "instance_all", lambda params: oracles)
        rc = lookup.main(["1AAA", "--all", "--format", "table"])
        captured = capsys.readouterr()
        assert rc == 0
        assert "insight: TransportError" in captured.err
        assert "== blockr" in captured.out
        assert "1AAA" in captured.out

    def test_all_failed_exit_code(self, monkeypatch, capsys):
        monkeypatch.setattr(lookup, "instance_all_multiaddr", lambda params: [_StubOracle("x", fail=True)])
        assert lookup.main(["1AAA", "--multiaddr"]) == 1

    def test_unknown_provider_exit_code(self, capsys):
        assert lookup.main(["1AAA", "--provider", "nope"]) == 2
        assert "Invalid api provider 'nope'" in capsys.readouterr().err

    def test_url_override_for_provider(self, monkeypatch):
        stub = _StubOracle("insight")
        monkeypatch.setattr(lookup, "instance", lambda name, params: stub)
        lookup.main(["1AAA", "--provider", "insight", "--url", "https://mine.test"])
        assert stub.seen[1].insight == "https://mine.test"


class TestDispatcher:
    def test_no_command_prints_help(self, capsys):
        assert cli_main([]) == 0
        assert "lookup" in capsys.readouterr().out

    def test_providers_listing(self, capsys):
        assert cli_main(["providers"]) == 0
        out = capsys.readouterr().out
        assert "btcdotcom" in out and "toshi" in out

    def test_dispatches_lookup(self, monkeypatch):
        seen = {}
        monkeypatch.setattr(lookup, "main", lambda argv: seen.setdefault("argv", argv) and 0)
        cli_main(["lookup", "1AAA", "--provider", "blockr"])
        assert seen["argv"] == ["1AAA", "--provider", "blockr"]

    def test_list_providers_rejects_args(self):
        with pytest.raises(SystemExit):
            list_providers.main(["--bogus"])
