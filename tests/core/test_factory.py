"""Tests for parse_dag_file and the line source."""

import io

import pytest

from ontodag.config import DEFAULT_CONFIG, merge_configs
from ontodag.graph.errors import MissingIdentifierError
from ontodag.graph.factory import parse_dag_file

SAMPLE = """!autogenerated-by: test
!version: 1.0
$ cellular_component ; GO:0005575
 % cell ; GO:0005623 ; synonym:cellular
  < nucleus ; GO:0005634
 % extracellular ; GO:0005576
"""


class TestParseDagFile:
    def test_parses_file(self, tmp_path):
        path = tmp_path / "component.dag"
        path.write_text(SAMPLE, encoding="utf-8")

        graph = parse_dag_file(path)

        assert graph.source == str(path)
        assert [r.name for r in graph.iter_roots()] == ["cellular_component"]
        cell = graph.find("GO:0005623", "cell")
        assert cell.synonyms == ["cellular"]
        assert [c.name for c in cell.components] == ["nucleus"]

    def test_missing_file_raises_os_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_dag_file(tmp_path / "missing.dag")

    def test_parse_error_propagates(self, tmp_path):
        path = tmp_path / "bad.dag"
        path.write_text("$ root ; 1\n % broken\n", encoding="utf-8")
        with pytest.raises(MissingIdentifierError) as exc_info:
            parse_dag_file(path)
        assert exc_info.value.line_number == 2

    def test_encoding_from_config(self, tmp_path):
        path = tmp_path / "latin.dag"
        path.write_bytes("$ caf\xe9 ; 1\n".encode("latin-1"))
        config = merge_configs(DEFAULT_CONFIG, {"parser": {"encoding": "latin-1"}})

        graph = parse_dag_file(path, config)

        assert graph.find_by_id("1")[0].name == "caf\xe9"

    def test_wrong_encoding_raises(self, tmp_path):
        path = tmp_path / "latin.dag"
        path.write_bytes("$ caf\xe9 ; 1\n".encode("latin-1"))
        with pytest.raises(UnicodeDecodeError):
            parse_dag_file(path)

    def test_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))
        graph = parse_dag_file("-")
        assert graph.term_count() == 4

    def test_stdin_uses_configured_encoding(self, monkeypatch):
        data = "$ caf\xe9 ; 1\n".encode("latin-1")
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))
        config = merge_configs(DEFAULT_CONFIG, {"parser": {"encoding": "latin-1"}})

        graph = parse_dag_file("-", config)

        assert graph.find_by_id("1")[0].name == "caf\xe9"
