"""Relations - Marker characters and relationship kinds.

This module defines the vocabulary of the DAG format:
- Marker: The line/inline marker characters ($, %, <)
- RelationKind: The two edge kinds a term can take part in
"""

from __future__ import annotations

from enum import Enum


class RelationKind(Enum):
    """Types of edges between terms.

    - IS_A: Subsumption; the parent generalizes the child
    - PART_OF: Composition; the whole is composed of the component
    """

    IS_A = "is_a"
    PART_OF = "part_of"


class Marker(Enum):
    """Marker characters that introduce a term descriptor."""

    ROOT = "$"
    IS_A = "%"
    PART_OF = "<"

    @classmethod
    def from_char(cls, char: str) -> Marker | None:
        """Look up a marker by its character.

        Returns:
            The matching Marker, or None for any other character.
        """
        try:
            return cls(char)
        except ValueError:
            return None

    @property
    def relation(self) -> RelationKind | None:
        """Relation kind introduced by this marker (None for ROOT)."""
        if self is Marker.IS_A:
            return RelationKind.IS_A
        if self is Marker.PART_OF:
            return RelationKind.PART_OF
        return None


MARKER_CHARS = "".join(m.value for m in Marker)
