"""
In-memory TF-IDF search server.

Documents are split on spaces, stop words are dropped, and each remaining
term is stored in an inverted index with its term frequency (share of the
document's terms). Queries are parsed into plus words, which contribute
tf * idf to a document's relevance, and minus words, which remove every
document containing them from the results.

Usage:
    from search_server.search_server import SearchServer
    from search_server.document import DocumentStatus

    server = SearchServer("и в на")
    server.add_document(0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3])
    server.find_top_documents("пушистый -ошейник")
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import TYPE_CHECKING, Union

import numpy as np

from search_server.config import Config
from search_server.document import Document, DocumentStatus, compute_average_rating
from search_server.errors import (
    DanglingMinusError,
    DocumentOutOfRangeError,
    DuplicateDocumentIdError,
    EmptyQueryError,
    EmptyRatingsError,
    InvalidDocumentIdError,
    InvalidTextError,
    MalformedMinusError,
)
from search_server.string_processing import (
    is_valid_word,
    make_unique_non_empty_strings,
    split_into_words,
)

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
PredicateOrStatus = Union[DocumentPredicate, DocumentStatus, int]


# =============================================================================
# Query parsing
# =============================================================================


@dataclass
class Query:
    """Parsed query: words a document must contain and words it must not."""

    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)


def _parse_query_word(word: str, query: Query) -> None:
    if word.startswith("--"):
        raise MalformedMinusError(f"Query word {word!r} starts with two minus signs")
    if word == "-":
        raise DanglingMinusError("Query contains a minus sign without a word")
    if word.startswith("-"):
        query.minus_words.add(word[1:])
    else:
        query.plus_words.add(word)


def parse_query(raw_query: str, stop_words: Iterable[str] = ()) -> Query:
    """
    Parse raw query text into plus and minus words.

    Args:
        raw_query: Space-separated query words; "-word" excludes documents.
        stop_words: Words ignored by the parser.

    Returns:
        Query with deduplicated plus and minus words.

    Raises:
        EmptyQueryError: If raw_query is empty.
        InvalidTextError: If raw_query contains control characters.
        MalformedMinusError: If a word starts with "--".
        DanglingMinusError: If a word is a lone "-".
    """
    if not raw_query:
        raise EmptyQueryError("Query is empty")
    if not is_valid_word(raw_query):
        raise InvalidTextError("Query contains control characters")

    stop_words = stop_words if isinstance(stop_words, (set, frozenset)) else set(stop_words)
    query = Query()
    for word in split_into_words(raw_query):
        if word in stop_words:
            continue
        _parse_query_word(word, query)
    return query


# =============================================================================
# Search server
# =============================================================================


@dataclass
class DocumentData:
    status: DocumentStatus
    rating: int


def _as_predicate(document_predicate: PredicateOrStatus) -> DocumentPredicate:
    if isinstance(document_predicate, int):
        expected_status = DocumentStatus(document_predicate)
        return lambda document_id, status, rating: status == expected_status
    return document_predicate


class SearchServer:
    """
    Inverted-index search server with TF-IDF ranking.

    Args:
        stop_words: Either a space-separated string or a collection of words
            that are never indexed and are ignored in queries.
        max_result_document_count: Top-N cutoff (defaults to Config).
        epsilon: Relevance difference below which results are ordered by
            rating instead (defaults to Config).

    Raises:
        InvalidTextError: If a stop word contains control characters.
    """

    def __init__(
        self,
        stop_words: str | Iterable[str] = (),
        *,
        max_result_document_count: int | None = None,
        epsilon: float | None = None,
    ):
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        self._stop_words = frozenset(make_unique_non_empty_strings(stop_words))
        self.max_result_document_count = (
            Config.max_result_document_count
            if max_result_document_count is None
            else max_result_document_count
        )
        self.epsilon = Config.epsilon if epsilon is None else epsilon

        # term -> document id -> term frequency
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        # document id -> term -> term frequency
        self._document_to_word_freqs: dict[int, dict[str, float]] = {}
        self._documents: dict[int, DocumentData] = {}
        self._document_ids: list[int] = []

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._document_ids)

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    # -------------------------------------------------------------------------
    # Indexing
    # -------------------------------------------------------------------------

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        """
        Index a document.

        All checks run before the index is touched, so a failed call leaves
        the server unchanged.

        Raises:
            InvalidDocumentIdError: If document_id is negative.
            DuplicateDocumentIdError: If document_id is already indexed.
            InvalidTextError: If the text contains control characters.
            EmptyRatingsError: If ratings is empty.
            ValueError: If status is not a DocumentStatus value.
        """
        if document_id < 0:
            raise InvalidDocumentIdError(f"Document id {document_id} is negative")
        if document_id in self._documents:
            raise DuplicateDocumentIdError(f"Document id {document_id} already exists")
        if not is_valid_word(document):
            raise InvalidTextError(f"Text of document {document_id} contains control characters")
        if not ratings:
            raise EmptyRatingsError(f"Document {document_id} has no ratings")

        data = DocumentData(DocumentStatus(status), compute_average_rating(ratings))

        words = self._split_into_words_no_stop(document)
        word_frequencies: dict[str, float] = {}
        if words:
            word_count = len(words)
            word_frequencies = {word: count / word_count for word, count in Counter(words).items()}

        for word, term_frequency in word_frequencies.items():
            self._word_to_document_freqs.setdefault(word, {})[document_id] = term_frequency
        self._document_to_word_freqs[document_id] = word_frequencies
        self._documents[document_id] = data
        self._document_ids.append(document_id)
        logger.debug(
            "Added document %d (%d terms, %d distinct)",
            document_id,
            len(words),
            len(word_frequencies),
        )

    def get_document_count(self) -> int:
        return len(self._documents)

    def get_document_id(self, index: int) -> int:
        """Id of the document added at position index (0-based)."""
        if not 0 <= index < len(self._document_ids):
            raise DocumentOutOfRangeError(
                f"Index {index} is out of range for {len(self._document_ids)} documents"
            )
        return self._document_ids[index]

    def get_word_frequencies(self, document_id: int) -> dict[str, float]:
        """Term frequencies of one document; empty for unknown ids."""
        return dict(self._document_to_word_freqs.get(document_id, {}))

    # -------------------------------------------------------------------------
    # Querying
    # -------------------------------------------------------------------------

    def parse_query(self, raw_query: str) -> Query:
        query = parse_query(raw_query, self._stop_words)
        logger.debug(
            "Parsed query %r: plus=%s minus=%s",
            raw_query,
            sorted(query.plus_words),
            sorted(query.minus_words),
        )
        return query

    def find_top_documents(
        self,
        raw_query: str,
        document_predicate: PredicateOrStatus = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """
        Rank documents matching raw_query.

        Args:
            raw_query: Query text, see parse_query.
            document_predicate: Either a DocumentStatus (or its int value) to
                match exactly or a callable (document_id, status, rating) -> bool.

        Returns:
            At most max_result_document_count documents ordered by relevance
            descending, then by rating descending for near-equal relevance.
        """
        predicate = _as_predicate(document_predicate)
        query = self.parse_query(raw_query)
        matched_documents = self._find_all_documents(query, predicate)
        matched_documents.sort(key=cmp_to_key(self._compare_documents))
        logger.debug("Query %r matched %d documents", raw_query, len(matched_documents))
        return matched_documents[: self.max_result_document_count]

    def match_document(
        self, raw_query: str, document_id: int
    ) -> tuple[list[str], DocumentStatus]:
        """
        Plus words of raw_query contained in a document.

        Returns an empty word list if the document contains any minus word.
        Words are returned in lexicographic order.

        Raises:
            DocumentOutOfRangeError: If document_id is not indexed.
        """
        query = self.parse_query(raw_query)
        if document_id not in self._documents:
            raise DocumentOutOfRangeError(f"Document id {document_id} does not exist")

        status = self._documents[document_id].status
        word_frequencies = self._document_to_word_freqs[document_id]
        if any(word in word_frequencies for word in query.minus_words):
            return [], status
        matched_words = sorted(word for word in query.plus_words if word in word_frequencies)
        return matched_words, status

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        return [word for word in split_into_words(text) if word not in self._stop_words]

    def _inverse_document_frequency(self, words: list[str]) -> NDArray[np.float64]:
        """idf(t) = ln(N / df(t)) for indexed words."""
        df_values = np.array(
            [len(self._word_to_document_freqs[word]) for word in words], dtype=np.float64
        )
        return np.log(self.get_document_count() / df_values)

    def _find_all_documents(self, query: Query, predicate: DocumentPredicate) -> list[Document]:
        document_to_relevance: dict[int, float] = {}

        plus_words = sorted(word for word in query.plus_words if word in self._word_to_document_freqs)
        if plus_words:
            idf_values = self._inverse_document_frequency(plus_words)
            for word, idf in zip(plus_words, idf_values):
                for document_id, term_frequency in self._word_to_document_freqs[word].items():
                    data = self._documents[document_id]
                    if predicate(document_id, data.status, data.rating):
                        document_to_relevance[document_id] = (
                            document_to_relevance.get(document_id, 0.0) + term_frequency * float(idf)
                        )

        # Minus words win over plus words regardless of the predicate.
        for word in query.minus_words:
            for document_id in self._word_to_document_freqs.get(word, {}):
                document_to_relevance.pop(document_id, None)

        return [
            Document(document_id, relevance, self._documents[document_id].rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    def _compare_documents(self, lhs: Document, rhs: Document) -> int:
        # Not transitive across chains of near-equal relevances.
        if abs(lhs.relevance - rhs.relevance) < self.epsilon:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1


__all__ = [
    "SearchServer",
    "Query",
    "DocumentData",
    "DocumentPredicate",
    "PredicateOrStatus",
    "parse_query",
]
