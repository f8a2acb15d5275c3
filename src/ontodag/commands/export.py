"""
ontodag.commands.export - Export a parsed DAG as JSON or CSV.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ontodag.commands.common import load_configuration, load_graph
from ontodag.graph.serialize import to_csv, to_json


def run(args: argparse.Namespace) -> int:
    """Run the export command."""
    config = load_configuration(args)
    if config is None:
        return 1
    graph = load_graph(args, config)
    if graph is None:
        return 1

    output_config = config.get("output", {})
    fmt = args.format or output_config.get("format", "json")
    if fmt == "csv":
        content = to_csv(graph)
    else:
        content = to_json(graph, indent=output_config.get("indent", 2))

    if args.output:
        try:
            Path(args.output).write_text(content, encoding="utf-8")
        except OSError as e:
            print(f"Error writing {args.output}: {e}", file=sys.stderr)
            return 1
        if not args.quiet:
            print(f"Wrote {graph.term_count()} terms to {args.output}")
    else:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")
    return 0
