"""Scoped key-value store contract.

Mirrors the host's storage API: values live in buckets addressed by a
scope (board, card, member, organization), the id of the scoped object,
and a visibility (shared or private). Each bucket is limited to
``MAX_BUCKET_CHARS`` characters of serialized data.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Mapping

from startwork.exceptions import StoreQuotaError

logger = logging.getLogger(__name__)

# Host limit per scope/visibility bucket.
MAX_BUCKET_CHARS: int = 4096


class Scope(str, Enum):
    """Object a stored value is attached to."""

    BOARD = "board"
    CARD = "card"
    MEMBER = "member"
    ORGANIZATION = "organization"


class Visibility(str, Enum):
    """Who can read a stored value."""

    SHARED = "shared"
    PRIVATE = "private"


def check_quota(scope: Scope, scope_id: str, visibility: Visibility, bucket: Mapping[str, str]) -> None:
    """Raise ``StoreQuotaError`` if ``bucket`` serializes past the limit."""
    size = len(json.dumps(dict(bucket), separators=(",", ":")))
    if size > MAX_BUCKET_CHARS:
        raise StoreQuotaError(
            f"{scope.value}/{scope_id}/{visibility.value} would hold {size} chars "
            f"(limit {MAX_BUCKET_CHARS})"
        )


class KeyValueStore(ABC):
    """Abstract asynchronous scoped key-value store.

    Implementations raise ``StoreUnavailableError`` when the backing store
    cannot be read or written. A missing key is not an error: ``get``
    returns None.
    """

    @abstractmethod
    async def get(
        self, scope: Scope, scope_id: str, visibility: Visibility, key: str
    ) -> str | None:
        """Read one value, or None when the key is absent."""

    @abstractmethod
    async def set(
        self, scope: Scope, scope_id: str, visibility: Visibility, key: str, value: str
    ) -> None:
        """Write one value, replacing any previous value for the key."""
