"""
Default settings for the search server.

Values can be overridden via environment variables:
    SEARCH_SERVER_MAX_RESULTS=5          # Top-N cutoff for find_top_documents
    SEARCH_SERVER_EPSILON=1e-6           # Relevance tolerance for rating tie-break
    SEARCH_SERVER_REQUEST_WINDOW=1440    # Request queue window, in requests
    SEARCH_SERVER_LOG_LEVEL=WARNING      # Console driver log level

SearchServer and RequestQueue accept keyword arguments that take precedence
over these defaults.
"""

import os

DEFAULT_MAX_RESULT_DOCUMENT_COUNT = 5
DEFAULT_EPSILON = 1e-6
DEFAULT_REQUEST_WINDOW = 1440
DEFAULT_LOG_LEVEL = "WARNING"


class Config:
    """Process-wide defaults, read once at import time."""

    max_result_document_count: int = int(
        os.environ.get("SEARCH_SERVER_MAX_RESULTS", DEFAULT_MAX_RESULT_DOCUMENT_COUNT)
    )
    epsilon: float = float(os.environ.get("SEARCH_SERVER_EPSILON", DEFAULT_EPSILON))
    request_window: int = int(
        os.environ.get("SEARCH_SERVER_REQUEST_WINDOW", DEFAULT_REQUEST_WINDOW)
    )
    log_level: str = os.environ.get("SEARCH_SERVER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


__all__ = [
    "Config",
    "DEFAULT_MAX_RESULT_DOCUMENT_COUNT",
    "DEFAULT_EPSILON",
    "DEFAULT_REQUEST_WINDOW",
    "DEFAULT_LOG_LEVEL",
]
