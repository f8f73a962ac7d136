"""Settings popup controller for the board's IDE preference.

State Machine::

    IDLE_DISPLAYING --save()--> SAVING --ok--> CLOSED
                                   |
                                   +--store failure--> IDLE_DISPLAYING

While ``SAVING``, further saves are rejected so two writes to the same
preference key never race at the store. A failed save restores the
value that was displayed before and leaves the popup open for retry.
"""

from __future__ import annotations

import logging
from enum import Enum

from startwork.exceptions import (
    SaveInProgressError,
    SettingsError,
    StoreUnavailableError,
    UnknownMonikerError,
)
from startwork.host import NoticeLevel, Notifier, PopupHost, PopupRequest
from startwork.ides import IDERecord, IDERegistry
from startwork.store import PreferenceStore

logger = logging.getLogger(__name__)

SETTINGS_POPUP = PopupRequest(title="Settings", url="./settings.html", height=184)


class SettingsState(Enum):
    IDLE_DISPLAYING = "idle-displaying"
    SAVING = "saving"
    CLOSED = "closed"


class SettingsController:
    """Reflect the stored IDE preference into a selection and save it back."""

    def __init__(
        self,
        board_id: str,
        preferences: PreferenceStore,
        registry: IDERegistry,
        surface: PopupHost,
        notifier: Notifier | None = None,
    ) -> None:
        self.board_id = board_id
        self.preferences = preferences
        self.registry = registry
        self.surface = surface
        self.notifier = notifier
        self.state = SettingsState.IDLE_DISPLAYING
        self.selected: str = registry.default.moniker
        self._displayed: str = self.selected
        self.stored: str | None = None

    @property
    def options(self) -> list[tuple[IDERecord, ...]]:
        """Entries of the selection control, grouped by separator."""
        return self.registry.groups()

    async def open(self) -> str:
        """Load the stored preference into the selection.

        An absent or unknown stored moniker selects the first entry.

        Returns:
            The selected moniker.
        """
        stored = self.stored = await self.preferences.load(self.board_id)
        if stored in self.registry:
            self.selected = stored
        else:
            if stored is not None:
                logger.info(
                    "Stored IDE %r for board %s is not in the registry, showing default",
                    stored, self.board_id,
                )
            self.selected = self.registry.default.moniker
        self._displayed = self.selected
        self.state = SettingsState.IDLE_DISPLAYING
        return self.selected

    def select(self, moniker: str) -> None:
        """Change the control's value to ``moniker``."""
        if self.state is not SettingsState.IDLE_DISPLAYING:
            raise SettingsError(f"Cannot change selection while {self.state.value}")
        if moniker not in self.registry:
            raise UnknownMonikerError(f"Unknown IDE moniker '{moniker}'")
        self.selected = moniker

    async def save(self) -> None:
        """Persist the selection and close the popup.

        Raises:
            SaveInProgressError: If a save is already pending.
            SettingsError: If the popup is already closed.
            StoreUnavailableError: If the store write failed; the previous
                value is displayed again and the popup stays open.
        """
        if self.state is SettingsState.SAVING:
            raise SaveInProgressError(f"A save for board {self.board_id} is already pending")
        if self.state is SettingsState.CLOSED:
            raise SettingsError("Settings popup is closed")

        self.state = SettingsState.SAVING
        try:
            await self.preferences.save(self.board_id, self.selected)
        except StoreUnavailableError as exc:
            self.selected = self._displayed
            self.state = SettingsState.IDLE_DISPLAYING
            if self.notifier is not None:
                self.notifier.notify(f"Could not save settings: {exc}", NoticeLevel.ERROR)
            raise

        self._displayed = self.stored = self.selected
        self.state = SettingsState.CLOSED
        self.surface.close_popup()
