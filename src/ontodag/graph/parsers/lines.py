"""Line-level helpers for the DAG format.

Classifies raw lines, measures indentation, splits a line into marker and
descriptor tokens, and splits descriptors into fields.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ontodag.graph.relations import MARKER_CHARS

DEFAULT_COMMENT_PREFIX = "!"
DEFAULT_FIELD_DELIMITER = " ; "

_MARKER_SPLIT = re.compile(f"([{re.escape(MARKER_CHARS)}])")


@dataclass(frozen=True)
class ClassifiedLine:
    """A content line with its measured indentation.

    Attributes:
        line_number: 1-based position in the source.
        indent: Number of leading whitespace characters.
        content: Line text with the leading whitespace removed.
    """

    line_number: int
    indent: int
    content: str


def trim_left(text: str) -> str:
    """Remove leading whitespace only.

    Trailing whitespace is left alone; indentation is measured from the
    difference in length.
    """
    return text.lstrip()


def classify_line(
    raw: str, line_number: int, comment_prefix: str = DEFAULT_COMMENT_PREFIX
) -> ClassifiedLine | None:
    """Classify one raw line.

    Args:
        raw: The line as read, with or without its terminator.
        line_number: 1-based line number.
        comment_prefix: Lines starting with this (at column 0) are comments.

    Returns:
        ClassifiedLine for content lines, None for comments and blank lines.
    """
    line = raw.rstrip("\r\n")
    if not line or line.startswith(comment_prefix):
        return None
    content = trim_left(line)
    if not content:
        return None
    return ClassifiedLine(line_number=line_number, indent=len(line) - len(content), content=content)


def strip_escaped(text: str) -> str:
    """Remove backslashes used to escape punctuation in a name.

    A backslash is dropped and the character after it is kept literally,
    so `\\\\` yields a single backslash. A trailing lone backslash is dropped.
    """
    if "\\" not in text:
        return text
    out = []
    escaped = False
    for char in text:
        if escaped:
            out.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        else:
            out.append(char)
    return "".join(out)


def tokenize_relations(text: str) -> list[str]:
    """Split text on marker characters, keeping the markers as tokens.

    Empty tokens between adjacent markers are discarded, so the result
    alternates descriptor/marker only when the input is well formed.

    Example:
        >>> tokenize_relations(" wheel ; 0002 % vehicle ; 0003")
        [' wheel ; 0002 ', '%', ' vehicle ; 0003']
    """
    return [token for token in _MARKER_SPLIT.split(text) if token]


def split_fields(descriptor: str, delimiter: str = DEFAULT_FIELD_DELIMITER) -> list[str]:
    """Split a term descriptor into its fields.

    The descriptor is trimmed first; trailing empty fields are dropped.
    """
    fields = descriptor.strip().split(delimiter)
    while fields and not fields[-1]:
        fields.pop()
    return fields
