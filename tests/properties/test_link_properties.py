"""Property-based tests for deep-link encoding.

Verifies that link building is:
- Deterministic: same inputs -> byte-identical link
- Value-safe: arbitrary values never break the ``&``/``=`` structure
- Decodable: splitting at ``&`` and unquoting each value restores it
- Order-preserving: keys appear in insertion order
"""
from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from startwork.card import CardContext
from startwork.ides import IDE_RECORDS
from startwork.launch import build_route
from startwork.links import QueryParam, Route, build_link, parse_query


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

keys = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"),
    min_size=1,
    max_size=12,
)

# Card text, biased toward the characters that matter for the query string.
values = st.text(
    alphabet=st.one_of(st.sampled_from("&=/ ?#%+*:"), st.characters(exclude_categories=("Cs",))),
    max_size=40,
)

params = st.lists(st.builds(QueryParam, key=keys, value=values), max_size=8)

protocols = st.sampled_from([r.protocol for r in IDE_RECORDS])


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


@given(protocol=protocols, query=params)
def test_build_is_deterministic(protocol: str, query: list[QueryParam]) -> None:
    route = Route("startWork", action="open", query=tuple(query))
    assert build_link(protocol, route) == build_link(protocol, route)


@given(protocol=protocols, query=params)
def test_values_round_trip(protocol: str, query: list[QueryParam]) -> None:
    link = build_link(protocol, Route("startWork", action="open", query=tuple(query)))
    assert parse_query(link) == [(p.key, p.value) for p in query]


@given(value=values)
def test_encoded_value_has_no_separators(value: str) -> None:
    link = build_link("x://app/", Route("c", query=(QueryParam("v", value),)))
    encoded = link.split("?1=1&v=", 1)[1]
    for reserved in "&= /?#":
        assert reserved not in encoded


@given(
    card_id=values, short_id=values, title=values, description=values, url=values,
)
def test_card_link_keys_in_fixed_order(
    card_id: str, short_id: str, title: str, description: str, url: str
) -> None:
    context = CardContext(
        id=card_id, short_id=short_id, title=title, description=description, url=url,
    )
    link = build_link(IDE_RECORDS[0].protocol, build_route(context))
    assert [k for k, _ in parse_query(link)] == [
        "providerId", "id", "tokenId", "title", "body", "url",
    ]
