"""Term Registry - Resolves descriptors to shared Term instances.

The registry owns every Term created during one parse. A descriptor that
names an (id, name) pair already seen resolves to the existing Term, which
is what turns the indented text into a DAG rather than a tree.
"""

from __future__ import annotations

import logging
from typing import Iterator

from ontodag.graph.errors import MissingIdentifierError
from ontodag.graph.parsers.lines import DEFAULT_FIELD_DELIMITER, split_fields, strip_escaped
from ontodag.graph.Term import Identity, Term

logger = logging.getLogger(__name__)

DEFAULT_SYNONYM_PREFIX = "synonym:"


class TermRegistry:
    """Deduplicating store of terms keyed by Identity.

    Descriptor grammar: ``name ; id ; field ; field ...`` where each optional
    field is either ``synonym:<text>`` or ignored.
    """

    def __init__(
        self,
        field_delimiter: str = DEFAULT_FIELD_DELIMITER,
        synonym_prefix: str = DEFAULT_SYNONYM_PREFIX,
    ) -> None:
        self.field_delimiter = field_delimiter
        self.synonym_prefix = synonym_prefix
        self._terms: dict[Identity, Term] = {}

    def resolve(self, descriptor: str, line_number: int | None = None) -> Term:
        """Get or create the Term a descriptor refers to.

        Synonym fields are appended on every occurrence, including when the
        term already exists.

        Args:
            descriptor: Descriptor text (surrounding whitespace allowed).
            line_number: Source line, used in error messages.

        Returns:
            The shared Term for the descriptor's (id, name).

        Raises:
            MissingIdentifierError: If the descriptor has no id field.
        """
        fields = split_fields(descriptor, self.field_delimiter)
        if len(fields) < 2:
            raise MissingIdentifierError(descriptor.strip(), line_number)

        name = strip_escaped(fields[0])
        identity = Identity(id=fields[1], name=name)

        term = self._terms.get(identity)
        if term is None:
            term = Term(id=identity.id, name=identity.name)
            self._terms[identity] = term
            logger.debug("New term %s", identity)

        for extra in fields[2:]:
            if extra.startswith(self.synonym_prefix):
                term.add_synonym(extra[len(self.synonym_prefix) :])
        return term

    def get(self, term_id: str, name: str) -> Term | None:
        """Look up a term by id and name without creating it."""
        return self._terms.get(Identity(term_id, name))

    def find_by_id(self, term_id: str) -> list[Term]:
        """All terms registered with the given id (one per distinct name)."""
        return [term for identity, term in self._terms.items() if identity.id == term_id]

    def terms(self) -> Iterator[Term]:
        """Iterate terms in registration order."""
        yield from self._terms.values()

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, identity: object) -> bool:
        return identity in self._terms
