"""Board-scoped IDE preference on top of a ``KeyValueStore``.

The preference is a single moniker string stored at board scope with
shared visibility under the key ``"ide"``. It is written only by the
settings controller and read by both the settings controller and the
launch trigger.
"""

from __future__ import annotations

import logging

from startwork.exceptions import StoreUnavailableError
from startwork.store.base import KeyValueStore, Scope, Visibility

logger = logging.getLogger(__name__)

PREFERENCE_KEY: str = "ide"


class PreferenceStore:
    """Load and save the selected IDE moniker per board."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def load(self, board_id: str) -> str | None:
        """Return the stored moniker for ``board_id``, or None.

        Never raises for a missing key or an unreadable store: both
        resolve to None so callers fall back to the default IDE.
        """
        try:
            return await self._store.get(
                Scope.BOARD, board_id, Visibility.SHARED, PREFERENCE_KEY
            )
        except StoreUnavailableError as exc:
            logger.warning("Could not read IDE preference for board %s: %s", board_id, exc)
            return None

    async def save(self, board_id: str, moniker: str) -> None:
        """Persist ``moniker`` for ``board_id``.

        Any string is accepted; the registry is not consulted here.

        Raises:
            StoreUnavailableError: If the store cannot be written.
        """
        try:
            await self._store.set(
                Scope.BOARD, board_id, Visibility.SHARED, PREFERENCE_KEY, moniker
            )
        except StoreUnavailableError:
            logger.error("Could not save IDE preference %r for board %s", moniker, board_id)
            raise
        logger.info("Saved IDE preference %r for board %s", moniker, board_id)
