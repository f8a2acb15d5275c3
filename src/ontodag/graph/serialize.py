"""Graph Serialization - Export DagGraph to JSON-compatible dicts and CSV.

Terms are keyed by their identity string ``"<id>|<name>"`` (see
Identity.key) because an id alone does not identify a term.
"""

from __future__ import annotations

import csv
import io
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ontodag.graph.builder import DagGraph
    from ontodag.graph.Term import Term

CSV_COLUMNS = ["id", "name", "synonyms", "parents", "wholes", "is_root"]
LIST_SEPARATOR = "|"


def term_key(term: Term) -> str:
    return term.identity.key


def serialize_term(term: Term) -> dict[str, Any]:
    """Serialize a Term to a JSON-compatible dict.

    Edges are written as identity keys of the related terms.
    """
    result: dict[str, Any] = {
        "id": term.id,
        "name": term.name,
    }
    if term.synonyms:
        result["synonyms"] = list(term.synonyms)

    children = [term_key(child) for child in term.iter_children()]
    if children:
        result["children"] = children

    components = [term_key(component) for component in term.iter_components()]
    if components:
        result["components"] = components

    return result


def serialize_graph(graph: DagGraph) -> dict[str, Any]:
    """Serialize a DagGraph to a JSON-compatible dict.

    Returns:
        Dict with terms, roots, and metadata.
    """
    terms = {term_key(term): serialize_term(term) for term in graph.all_terms()}
    edges = graph.edge_counts()
    return {
        "terms": terms,
        "roots": [term_key(root) for root in graph.iter_roots()],
        "metadata": {
            "source": graph.source,
            "term_count": len(terms),
            "root_count": graph.root_count(),
            "edges": {kind.value: count for kind, count in edges.items()},
        },
    }


def to_json(graph: DagGraph, indent: int | None = 2) -> str:
    return json.dumps(serialize_graph(graph), indent=indent, ensure_ascii=False)


def to_csv(graph: DagGraph) -> str:
    """Render one CSV row per term.

    Multi-valued columns (synonyms, parents, wholes) are joined with "|";
    parents and wholes are listed by id.
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    roots = graph.root_set()
    for term in graph.all_terms():
        writer.writerow(
            [
                term.id,
                term.name,
                LIST_SEPARATOR.join(term.synonyms),
                LIST_SEPARATOR.join(p.id for p in term.iter_parents()),
                LIST_SEPARATOR.join(w.id for w in term.iter_wholes()),
                "yes" if term in roots else "no",
            ]
        )
    return output.getvalue()
