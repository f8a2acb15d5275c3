"""Graph module - Core DAG data structures.

Exports:
- Identity: Composite (id, name) key for terms
- Term: Ontology concept node with is-a and part-of edges
- Marker: DAG format marker characters
- RelationKind: Enum of edge kinds
- TermRegistry: Deduplicating term store for one parse
- DagGraph: Result container (roots plus index of all terms)

Note: DagParser is in ontodag.graph.parsers.dag (use graph.factory.parse_dag_file() to read a file)
"""

from ontodag.graph.builder import DagGraph
from ontodag.graph.registry import TermRegistry
from ontodag.graph.relations import Marker, RelationKind
from ontodag.graph.Term import Identity, Term

__all__ = [
    "Identity",
    "Term",
    "Marker",
    "RelationKind",
    "TermRegistry",
    "DagGraph",
]
