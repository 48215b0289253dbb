"""
List registered oracles, their multi-address capability and curated-set membership.
Use: chain-oracles providers
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from chain_oracles import config
from chain_oracles.providers.defaults import create_default_registry


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="chain-oracles providers", description=__doc__)
    parser.parse_args(argv)

    registry = create_default_registry()
    all_set = set(config.all_providers())
    multi_set = set(config.multiaddr_providers())
    print(f"{'name':<20} {'multiaddr':<10} {'all':<5} {'fast':<5}")
    for name in registry.names:
        print(
            f"{name:<20} {'yes' if registry.supports_multiaddr(name) else 'no':<10} "
            f"{'yes' if name in all_set else 'no':<5} {'yes' if name in multi_set else 'no':<5}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
