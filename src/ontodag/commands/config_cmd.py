"""
ontodag.commands.config_cmd - Inspect the effective configuration.

- `ontodag config path` - Show which config file is used
- `ontodag config show` - Print the merged configuration as TOML
"""

from __future__ import annotations

import argparse
from pathlib import Path

import tomlkit

from ontodag.commands.common import load_configuration
from ontodag.config import find_config_file


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    action = getattr(args, "config_action", None)
    if action == "path":
        path = args.config or find_config_file(Path.cwd())
        print(path if path else "No .ontodag.toml found (using defaults)")
        return 0
    if action == "show":
        config = load_configuration(args)
        if config is None:
            return 1
        print(tomlkit.dumps(config), end="")
        return 0

    print("Usage: ontodag config <show|path>")
    return 1
