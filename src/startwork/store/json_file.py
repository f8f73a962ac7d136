"""JSON-file-backed key-value store.

All buckets live in one file, nested as
``{scope: {scope_id: {visibility: {key: value}}}}``. Keys are sorted on
write so the file is stable across saves. Writes go to a sibling temp
file first and then replace the target, so a crash never leaves a
half-written store behind.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from startwork.exceptions import StoreUnavailableError
from startwork.store.base import KeyValueStore, Scope, Visibility, check_quota

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """Persist scoped values to a JSON file on disk.

    A missing file reads as an empty store. An unreadable or corrupt file
    raises ``StoreUnavailableError`` on both reads and writes.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot read store {self.path}: {exc}") from exc
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise StoreUnavailableError(f"Corrupt store {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StoreUnavailableError(f"Corrupt store {self.path}: top level is not an object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StoreUnavailableError(f"Cannot write store {self.path}: {exc}") from exc
        logger.debug("Wrote store %s", self.path)

    def _bucket(
        self,
        data: dict[str, Any],
        scope: Scope,
        scope_id: str,
        visibility: Visibility,
        *,
        create: bool,
    ) -> dict[str, Any]:
        """Walk ``scope -> scope_id -> visibility``, checking each level is an object.

        Missing levels read as empty, or are created when ``create`` is set.

        Raises:
            StoreUnavailableError: If a level holds something other than an object.
        """
        node = data
        path: list[str] = []
        for part in (scope.value, scope_id, visibility.value):
            path.append(part)
            child = node.get(part)
            if child is None:
                child = {}
                if create:
                    node[part] = child
            elif not isinstance(child, dict):
                raise StoreUnavailableError(
                    f"Corrupt store {self.path}: {'/'.join(path)} is not an object"
                )
            node = child
        return node

    async def get(
        self, scope: Scope, scope_id: str, visibility: Visibility, key: str
    ) -> str | None:
        bucket = self._bucket(self._read(), scope, scope_id, visibility, create=False)
        value = bucket.get(key)
        return value if isinstance(value, str) else None

    async def set(
        self, scope: Scope, scope_id: str, visibility: Visibility, key: str, value: str
    ) -> None:
        data = self._read()
        bucket = self._bucket(data, scope, scope_id, visibility, create=True)
        bucket[key] = value
        check_quota(scope, scope_id, visibility, bucket)
        self._write(data)
