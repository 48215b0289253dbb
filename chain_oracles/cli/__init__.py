"""Command-line entrypoints (chain-oracles <command>)."""
