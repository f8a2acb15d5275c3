"""
ontodag.commands.show - Print the term hierarchy of a DAG file.

Terms are printed in DAG notation: "%" before an is-a child, "<" before a
part-of component. A term reached a second time is printed once more with
"..." and not expanded again.
"""

from __future__ import annotations

import argparse

from ontodag.commands.common import load_configuration, load_graph
from ontodag.graph.builder import DagGraph
from ontodag.graph.relations import Marker, RelationKind
from ontodag.graph.Term import Term


def run(args: argparse.Namespace) -> int:
    """Run the show command."""
    config = load_configuration(args)
    if config is None:
        return 1
    graph = load_graph(args, config)
    if graph is None:
        return 1

    if args.stats:
        print_stats(graph)
        return 0

    for line in render_hierarchy(graph, max_depth=args.depth):
        print(line)
    return 0


def render_hierarchy(graph: DagGraph, max_depth: int | None = None) -> list[str]:
    """Render root terms and their descendants as indented lines."""
    lines: list[str] = []
    expanded: set[int] = set()

    def visit(term: Term, marker: Marker, depth: int) -> None:
        prefix = " " * depth
        synonyms = "".join(f" ; synonym:{s}" for s in term.synonyms)
        if id(term) in expanded:
            lines.append(f"{prefix}{marker.value} {term}{synonyms} ...")
            return
        lines.append(f"{prefix}{marker.value} {term}{synonyms}")
        expanded.add(id(term))
        if max_depth is not None and depth >= max_depth:
            return
        for child in term.iter_children():
            visit(child, Marker.IS_A, depth + 1)
        for component in term.iter_components():
            visit(component, Marker.PART_OF, depth + 1)

    for root in graph.iter_roots():
        visit(root, Marker.ROOT, 0)
    return lines


def print_stats(graph: DagGraph) -> None:
    edges = graph.edge_counts()
    unreachable = sum(1 for _ in graph.unreachable_terms())
    print(f"Source:      {graph.source}")
    print(f"Terms:       {graph.term_count()}")
    print(f"Roots:       {graph.root_count()}")
    print(f"Is-a edges:  {edges[RelationKind.IS_A]}")
    print(f"Part-of:     {edges[RelationKind.PART_OF]}")
    print(f"Unreachable: {unreachable}")
