"""
ontodag.search.documents - Flatten terms into search index documents.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from ontodag.graph.builder import DagGraph
    from ontodag.graph.Term import Term
    from ontodag.search.client import SearchClient


def term_to_document(term: Term) -> dict[str, Any]:
    """Build the index document for a term.

    The document id is the term's identity key so that two terms sharing an
    id but not a name stay separate documents.
    """
    ancestors = list(term.ancestors())
    return {
        "id": term.identity.key,
        "term_id": term.id,
        "name": term.name,
        "synonyms": list(term.synonyms),
        "parent_ids": [p.id for p in term.iter_parents()],
        "whole_ids": [w.id for w in term.iter_wholes()],
        "ancestor_ids": sorted({a.id for a in ancestors}),
        "ancestor_names": sorted({a.name for a in ancestors}),
    }


def graph_to_documents(graph: DagGraph) -> Iterator[dict[str, Any]]:
    for term in graph.all_terms():
        yield term_to_document(term)


def index_graph(graph: DagGraph, client: SearchClient) -> int:
    """Push every term of a graph to the search service.

    Returns:
        Number of documents sent.
    """
    return client.add_documents(graph_to_documents(graph))
