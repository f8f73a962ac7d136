"""Card context extraction.

Pulls the fields a start-work link needs from the live card and turns
them into the ordered query parameters the desktop application reads.
"""

from __future__ import annotations

from dataclasses import dataclass

from startwork.card.sources import CardSource
from startwork.links import QueryParam

# Identifies this board product to the receiving desktop application.
PROVIDER_ID: str = "trello*com"

# Host field names, in the order they are requested.
CARD_FIELDS: tuple[str, ...] = ("id", "shortLink", "name", "desc", "url")


@dataclass(frozen=True)
class CardContext:
    """Snapshot of one card, taken per launch and never persisted.

    Absent source fields are stored as empty strings.
    """

    id: str
    short_id: str
    title: str
    description: str
    url: str
    provider_id: str = PROVIDER_ID

    def query_params(self) -> tuple[QueryParam, ...]:
        """Return the link query in its fixed order.

        Empty values keep their keys (``title=&body=``).
        """
        return (
            QueryParam("providerId", self.provider_id),
            QueryParam("id", self.id),
            QueryParam("tokenId", self.short_id),
            QueryParam("title", self.title),
            QueryParam("body", self.description),
            QueryParam("url", self.url),
        )


async def extract_card_context(source: CardSource) -> CardContext:
    """Read the in-context card from ``source``.

    Raises:
        CardContextUnavailableError: Propagated from the source.
    """
    card = await source.fetch(*CARD_FIELDS)
    return CardContext(
        id=card.get("id") or "",
        short_id=card.get("shortLink") or "",
        title=card.get("name") or "",
        description=card.get("desc") or "",
        url=card.get("url") or "",
    )
