"""Graph Factory - Single entry point for parsing DAG files.

Commands should use parse_dag_file() rather than opening files and
constructing parsers themselves.
"""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, TextIO

from ontodag.config import DEFAULT_CONFIG
from ontodag.graph.builder import DagGraph
from ontodag.graph.parsers.dag import DagParser

STDIN_PATH = "-"


@contextmanager
def open_source(path: str | Path, encoding: str = "utf-8") -> Iterator[TextIO]:
    """Open a DAG source for reading.

    Args:
        path: File path, or "-" for standard input.
        encoding: Text encoding of the file or of standard input.

    Yields:
        A text stream of lines. Read errors propagate unchanged.
    """
    if str(path) == STDIN_PATH:
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            # Already a text stream (e.g. replaced in tests)
            yield sys.stdin
            return
        stream = io.TextIOWrapper(buffer, encoding=encoding)
        try:
            yield stream
        finally:
            # Leave sys.stdin usable
            stream.detach()
        return
    with open(path, encoding=encoding) as handle:
        yield handle


def parse_dag_file(path: str | Path, config: dict[str, Any] | None = None) -> DagGraph:
    """Parse a DAG file into a DagGraph.

    Args:
        path: File to read, or "-" for standard input.
        config: Effective configuration (defaults if omitted).

    Returns:
        The parsed graph.

    Raises:
        DagParseError: If the document is malformed.
        OSError: If the file cannot be read.
    """
    config = config or DEFAULT_CONFIG
    encoding = config.get("parser", {}).get("encoding", "utf-8")
    parser = DagParser.from_config(config)
    with open_source(path, encoding) as lines:
        return parser.parse(lines, source=str(path))
