#!/usr/bin/env python3
"""
Line-oriented console driver for the search server.

Input (one item per line):
    stop words separated by spaces
    N, the number of documents
    N times: document text, then "<count> <rating_1> ... <rating_count>"
    the query

Documents get ids 0..N-1 and status ACTUAL. Results are printed one per line.

Usage:
    search-server < input.txt
    search-server --match --page-size 2 --verbose < input.txt
    search-server --status banned < input.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Protocol, TextIO

from search_server.config import Config
from search_server.document import Document, DocumentStatus
from search_server.errors import SearchServerError
from search_server.paginator import paginate
from search_server.request_queue import RequestQueue
from search_server.search_server import SearchServer

logger = logging.getLogger(__name__)


# =============================================================================
# Line I/O
# =============================================================================


class LineSource(Protocol):
    """Anything that yields input lines without their line terminator."""

    def read_line(self) -> str: ...


class LineSink(Protocol):
    """Anything that accepts output lines."""

    def write_line(self, line: str) -> None: ...


class StreamLineSource:
    def __init__(self, stream: TextIO):
        self.stream = stream

    def read_line(self) -> str:
        return self.stream.readline().rstrip("\r\n")


class StreamLineSink:
    def __init__(self, stream: TextIO):
        self.stream = stream

    def write_line(self, line: str) -> None:
        self.stream.write(line + "\n")


def read_line_with_number(source: LineSource) -> int:
    """Read a line holding a single integer."""
    line = source.read_line().strip()
    try:
        return int(line)
    except ValueError:
        raise ValueError(f"Expected an integer, got {line!r}") from None


def read_ratings(source: LineSource) -> list[int]:
    """Read a "<count> <rating_1> ... <rating_count>" line."""
    values = [int(value) for value in source.read_line().split()]
    if not values:
        return []
    count, ratings = values[0], values[1:]
    if count != len(ratings):
        raise ValueError(f"Expected {count} ratings, got {len(ratings)}")
    return ratings


# =============================================================================
# Formatting
# =============================================================================


def format_document(document: Document) -> str:
    return str(document)


def format_match_result(words: list[str], status: DocumentStatus) -> str:
    return (
        "{ "
        f"status = {int(status)}, "
        f"words ={''.join(' ' + word for word in words)}}}"
    )


# =============================================================================
# Driver
# =============================================================================


def run(
    source: LineSource,
    sink: LineSink,
    status: DocumentStatus = DocumentStatus.ACTUAL,
    match: bool = False,
    page_size: int | None = None,
) -> RequestQueue:
    """
    Read stop words, documents and a query from source and write results to sink.

    Returns:
        The request queue that answered the query, for callers that report
        request statistics.
    """
    search_server = SearchServer(source.read_line())
    document_count = read_line_with_number(source)
    for document_id in range(document_count):
        document = source.read_line()
        ratings = read_ratings(source)
        search_server.add_document(document_id, document, DocumentStatus.ACTUAL, ratings)
    logger.info("Indexed %d documents", search_server.get_document_count())

    raw_query = source.read_line()
    request_queue = RequestQueue(search_server)
    results = request_queue.add_find_request(raw_query, status)

    if page_size is None:
        for document in results:
            sink.write_line(format_document(document))
    else:
        for page in paginate(results, page_size):
            for document in page:
                sink.write_line(format_document(document))
            sink.write_line("Page break")

    if match:
        for document_id in search_server:
            words, document_status = search_server.match_document(raw_query, document_id)
            sink.write_line(format_match_result(words, document_status))

    logger.info("Requests without results: %d", request_queue.get_no_result_requests())
    return request_queue


def _parse_status(value: str) -> DocumentStatus:
    try:
        return DocumentStatus[value.upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown document status: {value}") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Index documents from stdin and run a TF-IDF query")
    parser.add_argument(
        "--status",
        type=_parse_status,
        default=DocumentStatus.ACTUAL,
        help="Only return documents with this status (actual, irrelevant, banned, removed)",
    )
    parser.add_argument("--match", action="store_true", help="Print matched query words per document")
    parser.add_argument("--page-size", type=int, help="Print results in pages of this size")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else Config.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run(
            StreamLineSource(sys.stdin),
            StreamLineSink(sys.stdout),
            status=args.status,
            match=args.match,
            page_size=args.page_size,
        )
    except (SearchServerError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
