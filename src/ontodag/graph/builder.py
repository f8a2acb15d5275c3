"""Graph container - Holds the result of one DAG parse.

DagGraph pairs the root terms (those introduced with the root marker)
with an index of every term the parse registered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ontodag.graph.relations import RelationKind
from ontodag.graph.Term import Identity, Term


@dataclass
class DagGraph:
    """Container for a parsed ontology DAG.

    Uses an iterator-only API for traversal.

    Attributes:
        source: Where the terms were read from, for display only.
    """

    source: str = ""

    # Internal storage (prefixed) - excluded from constructor
    _roots: list[Term] = field(default_factory=list, init=False)
    _index: dict[Identity, Term] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def from_terms(cls, roots: Iterable[Term], terms: Iterable[Term], source: str = "") -> DagGraph:
        """Build a graph from root terms and all registered terms."""
        graph = cls(source=source)
        for term in terms:
            graph._index[term.identity] = term
        for root in roots:
            if root not in graph._roots:
                graph._roots.append(root)
            graph._index.setdefault(root.identity, root)
        return graph

    def iter_roots(self) -> Iterator[Term]:
        """Iterate root terms in the order they were declared."""
        yield from self._roots

    def root_set(self) -> set[Term]:
        return set(self._roots)

    def root_count(self) -> int:
        return len(self._roots)

    def has_root(self, term_id: str) -> bool:
        """Check if any root term has the given id."""
        return any(r.id == term_id for r in self._roots)

    def find(self, term_id: str, name: str) -> Term | None:
        """Find a term by its full identity."""
        return self._index.get(Identity(term_id, name))

    def find_by_id(self, term_id: str) -> list[Term]:
        """Find all terms with the given id."""
        return [t for t in self._index.values() if t.id == term_id]

    def all_terms(self) -> Iterator[Term]:
        """Iterate ALL terms, including ones not reachable from a root."""
        yield from self._index.values()

    def term_count(self) -> int:
        return len(self._index)

    def all_connected_terms(self, order: str = "pre") -> Iterator[Term]:
        """Iterate terms reachable from the roots, each once.

        Args:
            order: Traversal order ("pre", "post", "level").
        """
        seen: set[int] = set()
        for root in self._roots:
            for term in root.walk(order):
                if id(term) not in seen:
                    seen.add(id(term))
                    yield term

    def unreachable_terms(self) -> Iterator[Term]:
        """Iterate terms that no root reaches."""
        reachable = {id(t) for t in self.all_connected_terms()}
        for term in self._index.values():
            if id(term) not in reachable:
                yield term

    def edge_counts(self) -> dict[RelationKind, int]:
        """Count edges of each relation kind across the whole graph."""
        return {
            RelationKind.IS_A: sum(t.child_count() for t in self._index.values()),
            RelationKind.PART_OF: sum(t.component_count() for t in self._index.values()),
        }
