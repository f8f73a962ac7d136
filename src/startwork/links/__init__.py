"""Route model and deep-link builder."""

from __future__ import annotations

from startwork.links.builder import (
    QUERY_MARKER,
    QueryParam,
    Route,
    build_link,
    encode_value,
    parse_query,
)

__all__ = [
    "QUERY_MARKER",
    "QueryParam",
    "Route",
    "build_link",
    "encode_value",
    "parse_query",
]
