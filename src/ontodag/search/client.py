"""
ontodag.search.client - Client for a Solr-style search service.

SearchClientFactory replaces a process-wide client singleton: callers own
a factory built from explicit configuration, and the factory creates its
client on first use, once, under a lock.
"""

from __future__ import annotations

import json
import logging
import threading
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any, Iterable

from ontodag.config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class SearchIndexError(RuntimeError):
    """The search service rejected a request or could not be reached."""


@dataclass(frozen=True)
class SearchConfig:
    """Connection settings for the search service.

    Attributes:
        url: Base URL of the service, e.g. http://localhost:8983/solr
        collection: Collection (core) that receives term documents.
        timeout: Per-request timeout in seconds.
        batch_size: Documents sent per update request.
        commit: Ask the service to commit after each update.
    """

    url: str
    collection: str
    timeout: float = 10
    batch_size: int = 500
    commit: bool = True

    @classmethod
    def from_config(cls, config: dict[str, Any] | None) -> SearchConfig:
        """Build from the ``[search]`` table, falling back to defaults."""
        defaults = DEFAULT_CONFIG["search"]
        search = {**defaults, **(config or {}).get("search", {})}
        return cls(
            url=str(search["url"]).rstrip("/"),
            collection=str(search["collection"]),
            timeout=search["timeout"],
            batch_size=int(search["batch_size"]),
            commit=bool(search["commit"]),
        )

    @property
    def collection_url(self) -> str:
        return f"{self.url}/{urllib.parse.quote(self.collection)}"


class SearchClient:
    """Minimal JSON client for a search collection."""

    def __init__(self, config: SearchConfig) -> None:
        self.config = config

    def _request(self, path: str, data: bytes | None = None) -> dict[str, Any]:
        url = f"{self.config.collection_url}/{path}"
        headers = {"Accept": "application/json"}
        if data is not None:
            headers["Content-Type"] = "application/json"
        req = urllib.request.Request(url, data=data, headers=headers)
        try:
            with urllib.request.urlopen(req, timeout=self.config.timeout) as resp:
                body = resp.read()
        except urllib.error.HTTPError as e:
            raise SearchIndexError(f"{url}: HTTP {e.code} {e.reason}") from e
        except (urllib.error.URLError, OSError) as e:
            raise SearchIndexError(f"{url}: {e}") from e
        try:
            return json.loads(body) if body else {}
        except json.JSONDecodeError as e:
            raise SearchIndexError(f"{url}: invalid JSON response") from e

    def ping(self) -> bool:
        """Check that the collection answers."""
        response = self._request("admin/ping")
        return response.get("status") == "OK"

    def add_documents(self, docs: Iterable[dict[str, Any]]) -> int:
        """Send documents to the collection in batches.

        Returns:
            Number of documents sent.

        Raises:
            SearchIndexError: On the first failed batch.
        """
        path = "update?commit=true" if self.config.commit else "update"
        sent = 0
        batch: list[dict[str, Any]] = []
        for doc in docs:
            batch.append(doc)
            if len(batch) >= self.config.batch_size:
                self._request(path, json.dumps(batch).encode("utf-8"))
                sent += len(batch)
                batch = []
        if batch:
            self._request(path, json.dumps(batch).encode("utf-8"))
            sent += len(batch)
        logger.info("Sent %d documents to %s", sent, self.config.collection_url)
        return sent


class SearchClientFactory:
    """Creates one SearchClient for its configuration, on first request."""

    def __init__(self, config: SearchConfig) -> None:
        self.config = config
        self._client: SearchClient | None = None
        self._lock = threading.Lock()

    def get_client(self) -> SearchClient:
        """Return the shared client, creating it if needed."""
        if self._client is None:
            with self._lock:
                if self._client is None:
                    logger.debug("Creating search client for %s", self.config.collection_url)
                    self._client = SearchClient(self.config)
        return self._client
