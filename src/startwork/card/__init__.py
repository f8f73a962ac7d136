"""Card data access and context extraction."""

from __future__ import annotations

from startwork.card.context import CARD_FIELDS, PROVIDER_ID, CardContext, extract_card_context
from startwork.card.sources import CardSource, JsonCardSource, StaticCardSource

__all__ = [
    "CARD_FIELDS",
    "CardContext",
    "CardSource",
    "JsonCardSource",
    "PROVIDER_ID",
    "StaticCardSource",
    "extract_card_context",
]
