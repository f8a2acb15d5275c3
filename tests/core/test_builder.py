"""Tests for DagGraph - the parse result container."""

import pytest

from ontodag.graph.builder import DagGraph
from ontodag.graph.relations import RelationKind
from ontodag.graph.Term import Term
from tests.core.dag_test_helpers import parse_text


@pytest.fixture
def graph():
    return parse_text(
        """
        $ anatomy ; 1
         % organ ; 2
          < tissue ; 3
         % heart ; 4 % organ ; 2
        $ process ; 5
        """
    )


class TestDagGraph:
    """Tests for DagGraph accessors."""

    def test_roots_in_declaration_order(self, graph):
        assert [r.id for r in graph.iter_roots()] == ["1", "5"]
        assert graph.root_count() == 2
        assert graph.has_root("5")
        assert not graph.has_root("2")

    def test_root_set(self, graph):
        assert {r.id for r in graph.root_set()} == {"1", "5"}

    def test_term_index(self, graph):
        assert graph.term_count() == 5
        assert graph.find("2", "organ") is graph.find_by_id("2")[0]
        assert graph.find("2", "wrong") is None

    def test_all_connected_terms_visit_once(self, graph):
        ids = [t.id for t in graph.all_connected_terms()]
        assert sorted(ids) == ["1", "2", "3", "4", "5"]
        assert len(ids) == len(set(ids))

    def test_edge_counts(self, graph):
        counts = graph.edge_counts()
        assert counts[RelationKind.IS_A] == 3
        assert counts[RelationKind.PART_OF] == 1

    def test_unreachable_terms(self):
        graph = parse_text(
            """
            $ root ; 1
             % a ; 2 % floating ; 9
            """
        )
        assert [t.id for t in graph.unreachable_terms()] == ["9"]

    def test_from_terms_dedupes_roots(self):
        t = Term(id="1", name="a")
        graph = DagGraph.from_terms([t, t], [t], source="mem")
        assert graph.root_count() == 1
        assert graph.term_count() == 1
        assert graph.source == "mem"
