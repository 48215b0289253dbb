"""
Top-level CLI dispatcher: chain-oracles <command> [args...].
All commands dispatch to package CLI modules.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .._version import __version__


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = argparse.ArgumentParser(
        prog="chain-oracles",
        description="Query blockchain explorer oracles for address balances",
    )
    parser.add_argument("--version", action="version", version=f"chain-oracles {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="command")
    subparsers.add_parser("lookup", help="Fetch balance/received/sent for addresses", add_help=False)
    subparsers.add_parser("providers", help="List available oracles", add_help=False)

    args, rest = parser.parse_known_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    if args.command == "lookup":
        from chain_oracles.cli import lookup as mod

        return mod.main(rest)
    if args.command == "providers":
        from chain_oracles.cli import list_providers as mod

        return mod.main(rest)

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
