"""In-process key-value store."""

from __future__ import annotations

from startwork.store.base import KeyValueStore, Scope, Visibility, check_quota

_BucketKey = tuple[Scope, str, Visibility]


class MemoryStore(KeyValueStore):
    """Dict-backed store; data lives as long as the instance."""

    def __init__(self) -> None:
        self._buckets: dict[_BucketKey, dict[str, str]] = {}

    async def get(
        self, scope: Scope, scope_id: str, visibility: Visibility, key: str
    ) -> str | None:
        return self._buckets.get((scope, scope_id, visibility), {}).get(key)

    async def set(
        self, scope: Scope, scope_id: str, visibility: Visibility, key: str, value: str
    ) -> None:
        bucket = dict(self._buckets.get((scope, scope_id, visibility), {}))
        bucket[key] = value
        check_quota(scope, scope_id, visibility, bucket)
        self._buckets[(scope, scope_id, visibility)] = bucket
