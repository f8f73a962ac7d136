"""Scoped key-value storage and the board IDE preference adapter.

Public API::

    from startwork.store import JsonFileStore, PreferenceStore

    prefs = PreferenceStore(JsonFileStore(Path("store.json")))
    await prefs.save("B1", "vsc")
    await prefs.load("B1")  # "vsc"
"""

from __future__ import annotations

from startwork.store.base import MAX_BUCKET_CHARS, KeyValueStore, Scope, Visibility
from startwork.store.json_file import JsonFileStore
from startwork.store.memory import MemoryStore
from startwork.store.preferences import PREFERENCE_KEY, PreferenceStore

__all__ = [
    "JsonFileStore",
    "KeyValueStore",
    "MAX_BUCKET_CHARS",
    "MemoryStore",
    "PREFERENCE_KEY",
    "PreferenceStore",
    "Scope",
    "Visibility",
]
