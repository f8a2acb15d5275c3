"""DagParser - Builds a term DAG from indentation-delimited text.

Each content line has the form::

    <indent><marker> name ; id [; field ...] [<marker> name ; id ...]*

The leading marker relates the line's term to the enclosing term found by
indentation: ``$`` declares a root, ``%`` an is-a child, ``<`` a part-of
component. Any further ``%``/``<`` pairs on the same line add extra parents
or wholes for the line's term.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from ontodag.graph.builder import DagGraph
from ontodag.graph.errors import MissingAncestorError, MissingIdentifierError
from ontodag.graph.parsers.lines import (
    DEFAULT_COMMENT_PREFIX,
    DEFAULT_FIELD_DELIMITER,
    classify_line,
    tokenize_relations,
)
from ontodag.graph.registry import DEFAULT_SYNONYM_PREFIX, TermRegistry
from ontodag.graph.relations import Marker
from ontodag.graph.Term import Term

logger = logging.getLogger(__name__)


class AncestorTracker:
    """Stack of enclosing terms keyed by indentation width.

    Indentation widths on the stack strictly increase from bottom to top.
    A line deeper than the previous one nests under the top entry. Any other
    line first unwinds every entry at the same or deeper indentation;
    whatever remains on top is the line's enclosing term.
    """

    def __init__(self) -> None:
        self._stack: list[tuple[int, Term]] = []
        self.previous_indent: int | None = None

    def enter(self, indent: int) -> Term | None:
        """Unwind to the level of a new line and return its enclosing term.

        Args:
            indent: Indentation width of the new line.

        Returns:
            The enclosing term, or None at the outermost level.
        """
        nested = self.previous_indent is not None and indent > self.previous_indent
        if not nested:
            while self._stack and self._stack[-1][0] >= indent:
                self._stack.pop()
        self.previous_indent = indent
        return self.current()

    def push(self, indent: int, term: Term) -> None:
        self._stack.append((indent, term))

    def current(self) -> Term | None:
        return self._stack[-1][1] if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)


class DagParser:
    """Parser for DAG format documents.

    A parser holds the state of one parse (ancestor stack, term registry,
    root accumulator) and is single-use: create a new instance per document.
    Separate instances share nothing and may run in parallel.
    """

    def __init__(
        self,
        field_delimiter: str = DEFAULT_FIELD_DELIMITER,
        comment_prefix: str = DEFAULT_COMMENT_PREFIX,
        synonym_prefix: str = DEFAULT_SYNONYM_PREFIX,
    ) -> None:
        self.comment_prefix = comment_prefix
        self.registry = TermRegistry(field_delimiter=field_delimiter, synonym_prefix=synonym_prefix)
        self.ancestors = AncestorTracker()
        self._roots: list[Term] = []
        self._used = False

    @classmethod
    def from_config(cls, config: dict[str, Any] | None) -> DagParser:
        """Create a parser from the ``[parser]`` configuration table."""
        parser_config = (config or {}).get("parser", {})
        return cls(
            field_delimiter=parser_config.get("field_delimiter", DEFAULT_FIELD_DELIMITER),
            comment_prefix=parser_config.get("comment_prefix", DEFAULT_COMMENT_PREFIX),
            synonym_prefix=parser_config.get("synonym_prefix", DEFAULT_SYNONYM_PREFIX),
        )

    def process(self, lines: Iterable[str]) -> set[Term]:
        """Parse a DAG document and return its root terms.

        Args:
            lines: Lines of DAG text, e.g. an open file.

        Returns:
            The set of terms declared with the root marker.

        Raises:
            DagParseError: On the first malformed line; nothing is returned.
        """
        self.read_terms(lines)
        return set(self._roots)

    def parse(self, lines: Iterable[str], source: str = "") -> DagGraph:
        """Parse a DAG document into a DagGraph.

        Same as process(), but the result also indexes every registered term.
        """
        self.read_terms(lines)
        return DagGraph.from_terms(self._roots, self.registry.terms(), source=source)

    def read_terms(self, lines: Iterable[str]) -> None:
        """Read DAG input line by line, building the term hierarchy."""
        if self._used:
            raise RuntimeError("DagParser instances are single-use; create a new parser per document")
        self._used = True

        for line_number, raw in enumerate(lines, start=1):
            line = classify_line(raw, line_number, self.comment_prefix)
            if line is None:
                continue
            parent = self.ancestors.enter(line.indent)
            term = self.make_term(line.content, parent, line.line_number)
            self.ancestors.push(line.indent, term)

        logger.debug(
            "Parsed %d terms, %d roots", len(self.registry), len(self._roots)
        )

    def make_term(self, content: str, parent: Term | None, line_number: int | None = None) -> Term:
        """Build (or fetch) the term declared by one line and wire its edges.

        Args:
            content: Line text without indentation, starting with a marker.
            parent: Enclosing term from indentation, if any.
            line_number: Source line, used in error messages.

        Returns:
            The line's term.
        """
        content = content.strip()
        primary = Marker.from_char(content[:1])
        tokens = tokenize_relations(content[1:])
        if not tokens or Marker.from_char(tokens[0]) is not None:
            raise MissingIdentifierError(content, line_number)

        term = self.registry.resolve(tokens[0], line_number)

        if primary is Marker.ROOT:
            if term not in self._roots:
                self._roots.append(term)
        elif primary is None:
            logger.warning(
                "line %s: unknown marker %r, term %s not linked", line_number, content[:1], term
            )
        else:
            if parent is None:
                raise MissingAncestorError(content, line_number)
            parent.link(term, primary.relation)

        # Remaining tokens are extra parents or wholes
        rest = tokens[1:]
        i = 0
        while i < len(rest):
            marker = Marker.from_char(rest[i])
            i += 1
            if marker is None:
                continue
            if marker is Marker.ROOT:
                # Skip the root's descriptor, but never a following marker
                logger.debug("line %s: ignoring inline root marker", line_number)
                if i < len(rest) and Marker.from_char(rest[i]) is None:
                    i += 1
                continue
            descriptor = rest[i] if i < len(rest) else None
            if descriptor is None or Marker.from_char(descriptor) is not None:
                raise MissingIdentifierError(descriptor or "", line_number)
            i += 1
            other = self.registry.resolve(descriptor, line_number)
            other.link(term, marker.relation)

        return term
