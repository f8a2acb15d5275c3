"""
ontodag.search - Push parsed terms to a search service.
"""

from ontodag.search.client import SearchClient, SearchClientFactory, SearchConfig, SearchIndexError
from ontodag.search.documents import graph_to_documents, index_graph, term_to_document

__all__ = [
    "SearchClient",
    "SearchClientFactory",
    "SearchConfig",
    "SearchIndexError",
    "graph_to_documents",
    "index_graph",
    "term_to_document",
]
