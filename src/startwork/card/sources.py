"""Card data sources.

A ``CardSource`` answers field requests for the card currently in context,
using the host's field names (``id``, ``shortLink``, ``name``, ``desc``,
``url``). Sources never cache: every ``fetch`` reads live state.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping

from startwork.exceptions import CardContextUnavailableError

logger = logging.getLogger(__name__)


class CardSource(ABC):
    """Abstract accessor for the in-context card's fields."""

    @abstractmethod
    async def fetch(self, *fields: str) -> Mapping[str, str | None]:
        """Return the requested fields; absent fields map to None.

        Raises:
            CardContextUnavailableError: If the card cannot be read.
        """


class StaticCardSource(CardSource):
    """Serve fields from an in-memory mapping."""

    def __init__(self, card: Mapping[str, str | None]) -> None:
        self._card = dict(card)

    async def fetch(self, *fields: str) -> Mapping[str, str | None]:
        return {name: self._card.get(name) for name in fields}


class JsonCardSource(CardSource):
    """Read the card from a JSON object on disk, re-reading on every fetch."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    async def fetch(self, *fields: str) -> Mapping[str, str | None]:
        try:
            card = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise CardContextUnavailableError(f"Cannot read card {self.path}: {exc}") from exc
        except ValueError as exc:
            raise CardContextUnavailableError(f"Invalid card JSON in {self.path}: {exc}") from exc
        if not isinstance(card, dict):
            raise CardContextUnavailableError(f"Card file {self.path} must hold a JSON object")
        logger.debug("Loaded card fields %s from %s", sorted(card), self.path)
        return {name: _as_text(card.get(name)) for name in fields}


def _as_text(value: object) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
