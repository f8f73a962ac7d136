"""Shared fixtures for startwork tests."""

from __future__ import annotations

import json
import pathlib

import pytest

from startwork.exceptions import StoreUnavailableError
from startwork.host import RecordingNavigator, RecordingNotifier, RecordingPopupHost
from startwork.ides import IDERegistry, default_registry
from startwork.store import KeyValueStore, MemoryStore, PreferenceStore, Scope, Visibility


class FailingStore(KeyValueStore):
    """Store whose reads and/or writes always fail."""

    def __init__(self, *, fail_get: bool = True, fail_set: bool = True) -> None:
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.inner = MemoryStore()

    async def get(self, scope: Scope, scope_id: str, visibility: Visibility, key: str) -> str | None:
        if self.fail_get:
            raise StoreUnavailableError("store offline")
        return await self.inner.get(scope, scope_id, visibility, key)

    async def set(
        self, scope: Scope, scope_id: str, visibility: Visibility, key: str, value: str
    ) -> None:
        if self.fail_set:
            raise StoreUnavailableError("store offline")
        await self.inner.set(scope, scope_id, visibility, key, value)


@pytest.fixture
def registry() -> IDERegistry:
    return default_registry()


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def prefs(memory_store: MemoryStore) -> PreferenceStore:
    return PreferenceStore(memory_store)


@pytest.fixture
def failing_store_factory():
    """Build a ``FailingStore`` with the given failure switches."""
    return FailingStore


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def popups() -> RecordingPopupHost:
    return RecordingPopupHost()


@pytest.fixture
def fix_bug_card() -> dict[str, str]:
    """The card used by the VS Code start-work scenario."""
    return {
        "id": "abc123",
        "shortLink": "xYz9",
        "name": "Fix bug",
        "desc": "",
        "url": "https://trello.com/c/xYz9",
    }


@pytest.fixture
def card_file(tmp_path: pathlib.Path, fix_bug_card: dict[str, str]) -> pathlib.Path:
    """Write the scenario card to a JSON file."""
    path = tmp_path / "card.json"
    path.write_text(json.dumps(fix_bug_card))
    return path


# Expected link for ``fix_bug_card`` opened in VS Code.
VSCODE_FIX_BUG_LINK = (
    "vscode://codestream.codestream/startWork/open?1=1"
    "&providerId=trello%2Acom&id=abc123&tokenId=xYz9&title=Fix%20bug&body="
    "&url=https%3A%2F%2Ftrello.com%2Fc%2FxYz9"
)


@pytest.fixture
def vscode_fix_bug_link() -> str:
    return VSCODE_FIX_BUG_LINK
