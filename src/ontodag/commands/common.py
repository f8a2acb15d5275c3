"""
ontodag.commands.common - Config and graph loading shared by commands.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from tomlkit.exceptions import ParseError

from ontodag.config import get_config, validate_config
from ontodag.graph.builder import DagGraph
from ontodag.graph.errors import DagParseError
from ontodag.graph.factory import parse_dag_file


def load_configuration(args: argparse.Namespace) -> dict[str, Any] | None:
    """Load configuration from --config, discovery, or defaults.

    Prints the problem and returns None if the config cannot be used.
    """
    try:
        config = get_config(getattr(args, "config", None))
    except (OSError, ParseError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return None

    errors = validate_config(config)
    if errors:
        for error in errors:
            print(f"Config error: {error}", file=sys.stderr)
        return None
    return config


def load_graph(args: argparse.Namespace, config: dict[str, Any]) -> DagGraph | None:
    """Parse the command's input file, printing any failure."""
    try:
        return parse_dag_file(args.file, config)
    except DagParseError as e:
        print(f"Parse error in {args.file}: {e}", file=sys.stderr)
    except FileNotFoundError:
        print(f"Error: file not found: {args.file}", file=sys.stderr)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {args.file}: {e}", file=sys.stderr)
    return None
