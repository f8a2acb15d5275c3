"""
ontodag.commands.index - Push parsed terms to the search service.

- `ontodag index FILE` - Send one document per term
- `ontodag index FILE --dry-run` - Print the documents instead
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace

from ontodag.commands.common import load_configuration, load_graph
from ontodag.search import SearchClientFactory, SearchConfig, SearchIndexError
from ontodag.search.documents import graph_to_documents, index_graph


def run(args: argparse.Namespace) -> int:
    """Run the index command."""
    config = load_configuration(args)
    if config is None:
        return 1
    graph = load_graph(args, config)
    if graph is None:
        return 1

    if args.dry_run:
        for doc in graph_to_documents(graph):
            print(json.dumps(doc, ensure_ascii=False))
        return 0

    search_config = SearchConfig.from_config(config)
    if args.url:
        search_config = replace(search_config, url=args.url.rstrip("/"))
    if args.collection:
        search_config = replace(search_config, collection=args.collection)

    factory = SearchClientFactory(search_config)
    try:
        sent = index_graph(graph, factory.get_client())
    except SearchIndexError as e:
        print(f"Indexing failed: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Indexed {sent} terms into {search_config.collection_url}")
    return 0
