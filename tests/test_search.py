"""Tests for ontodag.search - client factory, documents, indexing."""

import json
import threading
import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from ontodag.search import (
    SearchClient,
    SearchClientFactory,
    SearchConfig,
    SearchIndexError,
    graph_to_documents,
    index_graph,
    term_to_document,
)
from tests.core.dag_test_helpers import parse_text, term


def _response(body: bytes = b'{"responseHeader": {"status": 0}}'):
    resp = MagicMock()
    resp.read.return_value = body
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    return resp


@pytest.fixture
def config():
    return SearchConfig(url="http://search:8983/solr", collection="go", batch_size=2)


@pytest.fixture
def graph():
    return parse_text(
        """
        $ component ; 1
         % cell ; 2 ; synonym:cellula
          < nucleus ; 3
         % organelle ; 4
          % nucleus ; 3
        """
    )


class TestSearchConfig:
    def test_from_config_defaults(self):
        cfg = SearchConfig.from_config(None)
        assert cfg.url == "http://localhost:8983/solr"
        assert cfg.collection == "ontology"
        assert cfg.commit is True

    def test_from_config_overrides(self):
        cfg = SearchConfig.from_config(
            {"search": {"url": "http://x/solr/", "collection": "so", "batch_size": 10}}
        )
        assert cfg.url == "http://x/solr"
        assert cfg.collection_url == "http://x/solr/so"
        assert cfg.batch_size == 10


class TestSearchClientFactory:
    def test_client_created_once(self, config):
        factory = SearchClientFactory(config)
        assert factory.get_client() is factory.get_client()

    def test_factories_do_not_share_clients(self, config):
        assert SearchClientFactory(config).get_client() is not SearchClientFactory(config).get_client()

    def test_concurrent_first_use(self, config):
        factory = SearchClientFactory(config)
        clients = []
        threads = [
            threading.Thread(target=lambda: clients.append(factory.get_client()))
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(c) for c in clients}) == 1

    def test_client_uses_injected_config(self, config):
        assert SearchClientFactory(config).get_client().config is config


class TestSearchClient:
    def test_add_documents_batches(self, config):
        client = SearchClient(config)
        docs = [{"id": str(i)} for i in range(5)]
        with patch("urllib.request.urlopen", return_value=_response()) as mock_open:
            sent = client.add_documents(docs)

        assert sent == 5
        assert mock_open.call_count == 3
        first_request = mock_open.call_args_list[0].args[0]
        assert first_request.full_url == "http://search:8983/solr/go/update?commit=true"
        assert first_request.get_header("Content-type") == "application/json"
        assert json.loads(first_request.data) == [{"id": "0"}, {"id": "1"}]

    def test_no_commit(self):
        client = SearchClient(SearchConfig(url="http://s", collection="c", commit=False))
        with patch("urllib.request.urlopen", return_value=_response()) as mock_open:
            client.add_documents([{"id": "1"}])
        assert mock_open.call_args.args[0].full_url == "http://s/c/update"

    def test_empty_documents_sends_nothing(self, config):
        with patch("urllib.request.urlopen") as mock_open:
            assert SearchClient(config).add_documents([]) == 0
        mock_open.assert_not_called()

    def test_connection_error(self, config):
        with patch(
            "urllib.request.urlopen", side_effect=urllib.error.URLError("refused")
        ):
            with pytest.raises(SearchIndexError, match="refused"):
                SearchClient(config).add_documents([{"id": "1"}])

    def test_http_error(self, config):
        error = urllib.error.HTTPError("http://search", 400, "Bad Request", {}, None)
        with patch("urllib.request.urlopen", side_effect=error):
            with pytest.raises(SearchIndexError, match="400"):
                SearchClient(config).add_documents([{"id": "1"}])

    def test_invalid_json_response(self, config):
        with patch("urllib.request.urlopen", return_value=_response(b"<html>")):
            with pytest.raises(SearchIndexError, match="invalid JSON"):
                SearchClient(config).add_documents([{"id": "1"}])

    def test_ping(self, config):
        with patch("urllib.request.urlopen", return_value=_response(b'{"status": "OK"}')) as m:
            assert SearchClient(config).ping() is True
        assert m.call_args.args[0].full_url == "http://search:8983/solr/go/admin/ping"


class TestDocuments:
    def test_term_to_document(self, graph):
        doc = term_to_document(term(graph, "3"))
        assert doc["id"] == "3|nucleus"
        assert doc["term_id"] == "3"
        assert doc["name"] == "nucleus"
        assert doc["parent_ids"] == ["4"]
        assert doc["whole_ids"] == ["2"]
        assert doc["ancestor_ids"] == ["1", "2", "4"]
        assert doc["ancestor_names"] == ["cell", "component", "organelle"]

    def test_synonyms(self, graph):
        assert term_to_document(term(graph, "2"))["synonyms"] == ["cellula"]

    def test_graph_to_documents(self, graph):
        assert len(list(graph_to_documents(graph))) == 4

    def test_index_graph(self, graph):
        client = MagicMock()
        client.add_documents.side_effect = lambda docs: len(list(docs))
        assert index_graph(graph, client) == 4
