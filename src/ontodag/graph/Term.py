"""Term - Node representation for the ontology DAG.

This module provides the core data structures:
- Identity: Composite (id, name) key used to deduplicate terms
- Term: A concept node with is-a children, part-of components and synonyms
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterator

from ontodag.graph.relations import RelationKind


@dataclass(frozen=True)
class Identity:
    """Registry key for a term.

    Two descriptors with the same id and name resolve to the same Term.
    The same id with a different name (or vice versa) is a different term.
    """

    id: str
    name: str

    @property
    def key(self) -> str:
        """Single-string form ``"<id>|<name>"``.

        Backslashes and ``|`` inside either part are backslash-escaped, so
        distinct identities always produce distinct keys.
        """
        return f"{_escape_key_part(self.id)}|{_escape_key_part(self.name)}"

    def __str__(self) -> str:
        return self.key


def _escape_key_part(value: str) -> str:
    return value.replace("\\", "\\\\").replace("|", "\\|")


@dataclass(eq=False)
class Term:
    """A concept in the ontology DAG.

    Terms compare and hash by object identity: one parse hands out exactly
    one instance per Identity, so equality is reference equality.

    Edges are stored in both directions. `children`/`components` hold the
    outgoing is-a and part-of edges; `parents`/`wholes` mirror them. Each
    (source, target) pair is stored once per relation kind.

    Attributes:
        id: Term identifier as written in the descriptor.
        name: Term name with escape backslashes removed.
        synonyms: Synonyms in the order they were parsed (duplicates kept).
    """

    id: str
    name: str
    synonyms: list[str] = field(default_factory=list)

    # Internal storage (prefixed)
    _children: list[Term] = field(default_factory=list, repr=False)
    _parents: list[Term] = field(default_factory=list, repr=False)
    _components: list[Term] = field(default_factory=list, repr=False)
    _wholes: list[Term] = field(default_factory=list, repr=False)

    @property
    def identity(self) -> Identity:
        """The (id, name) key of this term."""
        return Identity(self.id, self.name)

    # Snapshot access
    @property
    def children(self) -> list[Term]:
        """Is-a children (terms this term generalizes)."""
        return list(self._children)

    @property
    def components(self) -> list[Term]:
        """Part-of components (terms this term is composed of)."""
        return list(self._components)

    @property
    def parents(self) -> list[Term]:
        """Is-a parents."""
        return list(self._parents)

    @property
    def wholes(self) -> list[Term]:
        """Terms this term is a component of."""
        return list(self._wholes)

    # Iterator access
    def iter_children(self) -> Iterator[Term]:
        yield from self._children

    def iter_components(self) -> Iterator[Term]:
        yield from self._components

    def iter_parents(self) -> Iterator[Term]:
        yield from self._parents

    def iter_wholes(self) -> Iterator[Term]:
        yield from self._wholes

    def iter_related(self, relation: RelationKind) -> Iterator[Term]:
        """Iterate outgoing targets of one relation kind."""
        if relation is RelationKind.IS_A:
            yield from self._children
        else:
            yield from self._components

    # Count and membership checks
    def child_count(self) -> int:
        return len(self._children)

    def component_count(self) -> int:
        return len(self._components)

    def has_child(self, term: Term) -> bool:
        return term in self._children

    def has_component(self, term: Term) -> bool:
        return term in self._components

    @property
    def is_root(self) -> bool:
        """True if this term has no is-a parents and is not part of anything."""
        return not self._parents and not self._wholes

    @property
    def is_leaf(self) -> bool:
        """True if this term has neither children nor components."""
        return not self._children and not self._components

    # Mutation
    def add_child(self, child: Term) -> None:
        """Add an is-a child with bidirectional linking.

        Re-adding an existing child is a no-op.
        """
        if child not in self._children:
            self._children.append(child)
        if self not in child._parents:
            child._parents.append(self)

    def add_component(self, component: Term) -> None:
        """Add a part-of component with bidirectional linking."""
        if component not in self._components:
            self._components.append(component)
        if self not in component._wholes:
            component._wholes.append(self)

    def add_synonym(self, synonym: str) -> None:
        """Append a synonym. Duplicates are kept as parsed."""
        self.synonyms.append(synonym)

    def link(self, target: Term, relation: RelationKind) -> None:
        """Add an outgoing edge of the given kind."""
        if relation is RelationKind.IS_A:
            self.add_child(target)
        else:
            self.add_component(target)

    # Traversal
    @property
    def depth(self) -> int:
        """Shortest is-a/part-of path length to a term with no parents or wholes."""
        depth = 0
        frontier = [self]
        seen: set[int] = {id(self)}
        while frontier:
            upward = []
            for term in frontier:
                if term.is_root:
                    return depth
                for up in (*term._parents, *term._wholes):
                    if id(up) not in seen:
                        seen.add(id(up))
                        upward.append(up)
            frontier = upward
            depth += 1
        # Every upward path loops back on itself
        return depth

    def walk(
        self,
        order: str = "pre",
        relations: tuple[RelationKind, ...] = (RelationKind.IS_A, RelationKind.PART_OF),
    ) -> Iterator[Term]:
        """Iterate over this term and its descendants, visiting each term once.

        Args:
            order: Traversal order:
                - "pre": Parent first (depth-first, pre-order)
                - "post": Children first (depth-first, post-order)
                - "level": Breadth-first (level order)
            relations: Edge kinds to follow.

        Yields:
            Term instances in the specified order.
        """
        if order == "pre":
            yield from self._walk_depth_first(relations, post=False, seen=set())
        elif order == "post":
            yield from self._walk_depth_first(relations, post=True, seen=set())
        elif order == "level":
            yield from self._walk_level(relations)
        else:
            raise ValueError(f"Unknown traversal order: {order}")

    def _downward(self, relations: tuple[RelationKind, ...]) -> Iterator[Term]:
        for relation in relations:
            yield from self.iter_related(relation)

    def _walk_depth_first(
        self, relations: tuple[RelationKind, ...], post: bool, seen: set[int]
    ) -> Iterator[Term]:
        seen.add(id(self))
        if not post:
            yield self
        for term in self._downward(relations):
            if id(term) not in seen:
                yield from term._walk_depth_first(relations, post, seen)
        if post:
            yield self

    def _walk_level(self, relations: tuple[RelationKind, ...]) -> Iterator[Term]:
        seen: set[int] = {id(self)}
        queue: deque[Term] = deque([self])
        while queue:
            term = queue.popleft()
            yield term
            for nxt in term._downward(relations):
                if id(nxt) not in seen:
                    seen.add(id(nxt))
                    queue.append(nxt)

    def ancestors(self) -> Iterator[Term]:
        """Iterate up through all is-a parents and part-of wholes (BFS).

        Each unique ancestor is visited once.
        """
        visited: set[int] = set()
        queue: deque[Term] = deque((*self._parents, *self._wholes))
        while queue:
            term = queue.popleft()
            if id(term) not in visited:
                visited.add(id(term))
                yield term
                queue.extend(term._parents)
                queue.extend(term._wholes)

    def find(self, predicate: Callable[[Term], bool]) -> Iterator[Term]:
        """Find this term and all descendants matching predicate."""
        for term in self.walk():
            if predicate(term):
                yield term

    def __str__(self) -> str:
        return f"{self.name} ; {self.id}"
