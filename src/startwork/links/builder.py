"""Deep-link construction for the companion desktop application.

Link Shape::

    <protocol><controller>[/<resource_id>][/<action>][?1=1&k1=v1&k2=v2...]

The ``1=1`` pair is a fixed no-op: the receiving parser expects at least
one ``&``-joined pair before the real parameters.

Encoding Rules:
    Only query values are percent-encoded, with every reserved character
    escaped (``quote(value, safe="")``): space becomes ``%20``, ``*``
    becomes ``%2A``, and ``&``, ``=``, ``/``, ``:`` are escaped. Keys and
    path segments are fixed identifiers and are emitted as-is.

``build_link`` is pure: identical inputs always yield byte-identical
output. It does not validate its inputs; an empty protocol or controller
is a caller bug and is guarded against in the launch trigger.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote, unquote

# Stable leading pair kept for the receiving application's parser.
QUERY_MARKER: str = "?1=1&"


@dataclass(frozen=True)
class QueryParam:
    """One ``key=value`` pair of the link's query string."""

    key: str
    value: str


@dataclass(frozen=True)
class Route:
    """Logical target inside the desktop application.

    Attributes:
        controller: First path segment, required.
        action: Optional last path segment.
        resource_id: Optional segment between controller and action.
        query: Ordered query parameters; order is preserved in the link.
    """

    controller: str
    action: str | None = None
    resource_id: str | None = None
    query: tuple[QueryParam, ...] = ()


def encode_value(value: str) -> str:
    """Percent-encode a query value."""
    return quote(value, safe="")


def build_link(protocol: str, route: Route) -> str:
    """Build the deep-link URI for ``route`` under ``protocol``.

    Args:
        protocol: IDE protocol prefix, ending with ``/``.
        route: Controller, optional resource id and action, and query.

    Returns:
        The complete URI string.
    """
    link = protocol + route.controller
    if route.resource_id:
        link += "/" + route.resource_id
    if route.action:
        link += "/" + route.action
    if route.query:
        link += QUERY_MARKER + "&".join(
            f"{param.key}={encode_value(param.value)}" for param in route.query
        )
    return link


def parse_query(link: str) -> list[tuple[str, str]]:
    """Split a built link's query back into decoded ``(key, value)`` pairs.

    The leading ``1=1`` marker pair is dropped. Values are decoded with
    ``unquote``, the inverse of ``encode_value``.
    """
    _, sep, query = link.partition("?")
    if not sep:
        return []
    pairs: list[tuple[str, str]] = []
    for chunk in query.split("&"):
        key, _, value = chunk.partition("=")
        pairs.append((key, unquote(value)))
    if pairs and pairs[0] == ("1", "1"):
        pairs = pairs[1:]
    return pairs
