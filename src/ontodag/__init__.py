"""
ontodag - DAG ontology parsing tools

Reads ontology descriptions written in the indentation-delimited DAG format
and builds a shared graph of terms linked by is-a and part-of relations.
The resulting terms can be inspected, exported, or pushed to a search index.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ontodag")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from ontodag.graph import DagGraph, Identity, RelationKind, Term
from ontodag.graph.errors import DagParseError, MissingAncestorError, MissingIdentifierError
from ontodag.graph.factory import parse_dag_file
from ontodag.graph.parsers.dag import DagParser

__all__ = [
    "__version__",
    "DagGraph",
    "DagParser",
    "DagParseError",
    "Identity",
    "MissingAncestorError",
    "MissingIdentifierError",
    "RelationKind",
    "Term",
    "parse_dag_file",
]
