"""Tests for the board IDE preference adapter."""

from __future__ import annotations

import asyncio

import pytest

from startwork.exceptions import StoreUnavailableError
from startwork.store import (
    PREFERENCE_KEY,
    JsonFileStore,
    MemoryStore,
    PreferenceStore,
    Scope,
    Visibility,
)


class TestRoundTrip:
    """Saving then loading returns the saved moniker for the same board only."""

    def test_save_then_load(self, prefs: PreferenceStore) -> None:
        asyncio.run(prefs.save("B1", "vsc"))
        assert asyncio.run(prefs.load("B1")) == "vsc"

    def test_other_board_is_absent(self, prefs: PreferenceStore) -> None:
        asyncio.run(prefs.save("B1", "vsc"))
        assert asyncio.run(prefs.load("B2")) is None

    def test_never_saved_is_absent(self, prefs: PreferenceStore) -> None:
        assert asyncio.run(prefs.load("B1")) is None

    def test_save_overwrites(self, prefs: PreferenceStore) -> None:
        asyncio.run(prefs.save("B1", "vsc"))
        asyncio.run(prefs.save("B1", "jb-idea"))
        assert asyncio.run(prefs.load("B1")) == "jb-idea"

    def test_any_string_accepted(self, prefs: PreferenceStore) -> None:
        """The adapter does not validate against the registry."""
        asyncio.run(prefs.save("B1", "retired-ide"))
        assert asyncio.run(prefs.load("B1")) == "retired-ide"


class TestStorageLayout:
    def test_board_shared_ide_key(self, memory_store: MemoryStore, prefs: PreferenceStore) -> None:
        asyncio.run(prefs.save("B1", "atom"))
        value = asyncio.run(
            memory_store.get(Scope.BOARD, "B1", Visibility.SHARED, PREFERENCE_KEY)
        )
        assert PREFERENCE_KEY == "ide"
        assert value == "atom"

    def test_private_bucket_untouched(self, memory_store: MemoryStore, prefs: PreferenceStore) -> None:
        asyncio.run(prefs.save("B1", "atom"))
        assert asyncio.run(
            memory_store.get(Scope.BOARD, "B1", Visibility.PRIVATE, PREFERENCE_KEY)
        ) is None


class TestFailures:
    """Reads fail softly; writes surface the error."""

    def test_load_failure_reads_as_none(self, failing_store_factory) -> None:
        prefs = PreferenceStore(failing_store_factory())
        assert asyncio.run(prefs.load("B1")) is None

    def test_load_failure_is_logged(self, failing_store_factory, caplog: pytest.LogCaptureFixture) -> None:
        prefs = PreferenceStore(failing_store_factory())
        asyncio.run(prefs.load("B1"))
        assert "Could not read IDE preference" in caplog.text

    def test_save_failure_raises(self, failing_store_factory) -> None:
        prefs = PreferenceStore(failing_store_factory())
        with pytest.raises(StoreUnavailableError):
            asyncio.run(prefs.save("B1", "vsc"))

    def test_misshapen_file_reads_as_none(self, tmp_path) -> None:
        path = tmp_path / "store.json"
        path.write_text('{"board": {"B1": "vsc"}}')
        assert asyncio.run(PreferenceStore(JsonFileStore(path)).load("B1")) is None
