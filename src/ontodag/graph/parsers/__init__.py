"""Parsers for the DAG ontology format.

- lines: Line classification, escaping and tokenizing helpers
- dag: AncestorTracker and DagParser
"""
