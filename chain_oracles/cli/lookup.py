"""
Fetch normalized address info from one or more oracles.

Use:
  chain-oracles lookup ADDR [ADDR ...] --provider btcdotcom
  chain-oracles lookup ADDR [ADDR ...] --all --format table
With --all / --multiaddr, an oracle that fails is reported and the next one is tried.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Sequence

from chain_oracles.core.errors import ChainOraclesError, ConfigError
from chain_oracles.providers.base import AddressOracle, AddressRecord, OracleParams
from chain_oracles.providers.defaults import instance, instance_all, instance_all_multiaddr

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "btcdotcom"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chain-oracles lookup", description="Fetch address info from oracles")
    parser.add_argument("addresses", nargs="+", help="Addresses, in the order results should be printed")
    which = parser.add_mutually_exclusive_group()
    which.add_argument("--provider", "-p", default=None, help=f"Oracle name (default {DEFAULT_PROVIDER})")
    which.add_argument("--all", action="store_true", help="Query every oracle in the curated set")
    which.add_argument("--multiaddr", action="store_true", help="Query only the multi-address oracles")
    parser.add_argument("--url", default=None, help="Base URL for --provider, overriding config")
    parser.add_argument("--oracle-raw", default=None, help="Write the raw oracle response to this file")
    parser.add_argument("--oracle-json", default=None, help="Write the decoded oracle response to this file")
    parser.add_argument("--format", choices=("json", "table"), default="json")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def _render_table(records: Sequence[AddressRecord]) -> str:
    header = f"{'address':<64} {'balance':>20} {'received':>20} {'sent':>20} used"
    lines = [header]
    for r in records:
        lines.append(
            f"{r.address:<64} {r.balance or '-':>20} {r.total_received or '-':>20} "
            f"{r.total_sent or '-':>20} {'yes' if r.used else 'no'}"
        )
    return "\n".join(lines)


def _select(args: argparse.Namespace, params: OracleParams) -> List[AddressOracle]:
    if args.all:
        return instance_all(params)
    if args.multiaddr:
        return instance_all_multiaddr(params)
    return [instance(args.provider or DEFAULT_PROVIDER, params)]


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    overrides = {"oracle_raw": args.oracle_raw, "oracle_json": args.oracle_json}
    if args.url and args.provider:
        overrides[args.provider.strip()] = args.url
    try:
        params = OracleParams.from_config(**overrides)
        oracles = _select(args, params)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    results: Dict[str, List[AddressRecord]] = {}
    for oracle in oracles:
        try:
            results[oracle.provider_name] = oracle.get_addresses_info(args.addresses, params)
        except ChainOraclesError as exc:
            logger.debug("oracle %s failed", oracle.provider_name, exc_info=True)
            print(f"{oracle.provider_name}: {type(exc).__name__}: {exc}", file=sys.stderr)

    if args.format == "json":
        payload = {name: [r.to_dict() for r in records] for name, records in results.items()}
        print(json.dumps(payload, indent=2))
    else:
        for name, records in results.items():
            print(f"== {name}")
            print(_render_table(records))
    return 0 if results else 1


if __name__ == "__main__":
    raise SystemExit(main())
