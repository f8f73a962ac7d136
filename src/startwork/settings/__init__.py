"""Board settings popup: IDE preference selection."""

from __future__ import annotations

from startwork.settings.controller import SETTINGS_POPUP, SettingsController, SettingsState

__all__ = [
    "SETTINGS_POPUP",
    "SettingsController",
    "SettingsState",
]
