"""Errors raised while building a DAG from text.

Every parse error is fatal: the parse stops at the first one and no
partial result is returned.
"""

from __future__ import annotations


class DagParseError(ValueError):
    """Base class for DAG format errors.

    Attributes:
        line_number: 1-based line where the error occurred, if known.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MissingIdentifierError(DagParseError):
    """A term descriptor lacks the mandatory id field."""

    def __init__(self, descriptor: str, line_number: int | None = None) -> None:
        self.descriptor = descriptor
        super().__init__(f"term does not have an id: {descriptor!r}", line_number)


class MissingAncestorError(DagParseError):
    """An is-a or part-of line has no enclosing term to attach to."""

    def __init__(self, descriptor: str, line_number: int | None = None) -> None:
        self.descriptor = descriptor
        super().__init__(f"no enclosing term for relation: {descriptor!r}", line_number)
