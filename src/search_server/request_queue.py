"""
Sliding-window statistics of search requests.

Every request advances the clock by one tick. The queue keeps the results of
the last `window` requests (1440 by default, one per minute of a day) and
tracks how many of them returned no documents.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from search_server.config import Config
from search_server.document import Document, DocumentStatus
from search_server.search_server import PredicateOrStatus, SearchServer

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    time: int = 0
    results_num: int = 0


class RequestQueue:
    """
    Records find requests made through a SearchServer.

    Args:
        search_server: Server that answers the requests.
        window: Number of most recent requests taken into account.
    """

    def __init__(self, search_server: SearchServer, *, window: int | None = None):
        self.search_server = search_server
        self.window = Config.request_window if window is None else window
        self._requests: deque[QueryResult] = deque()
        self._current_time = 0
        self._no_result_requests = 0

    def __len__(self) -> int:
        return len(self._requests)

    def add_find_request(
        self,
        raw_query: str,
        document_predicate: PredicateOrStatus = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """Run find_top_documents and record how many documents it returned."""
        result = self.search_server.find_top_documents(raw_query, document_predicate)
        self.record_query(len(result))
        return result

    def record_query(self, results_count: int) -> None:
        """Advance the clock by one tick and record a request outcome."""
        self._current_time += 1
        if self._requests and self._current_time - self._requests[0].time >= self.window:
            expired = self._requests.popleft()
            if expired.results_num == 0:
                self._no_result_requests -= 1
            logger.debug("Evicted request from tick %d", expired.time)

        self._requests.append(QueryResult(self._current_time, results_count))
        if results_count == 0:
            self._no_result_requests += 1

    def get_no_result_requests(self) -> int:
        return self._no_result_requests


__all__ = ["RequestQueue", "QueryResult"]
