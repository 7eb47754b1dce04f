"""Metrics – MetricStore: lock-guarded owner of a family's metric instances.

The store is the only structure in a family that needs exclusive-mutation
discipline.  Metric instances carry their own locks, so the store lock is held
only while the key map itself is read or changed.

Removal policy: a caller still holding a reference to a removed metric may keep
mutating it; the instance is detached and never exported again, and the garbage
collector reclaims it once the last reference is dropped.
"""
from __future__ import annotations

import dataclasses
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from mp_metrics.kernel.labels import Label, LabelSetKey

M = TypeVar("M")


@dataclasses.dataclass(frozen=True)
class StoreEntry(Generic[M]):
    labels: tuple[Label, ...]
    metric: M


class MetricStore(Generic[M]):
    """Mapping from :class:`LabelSetKey` to the single metric owning that key."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[LabelSetKey, StoreEntry[M]] = {}
        # id(metric) -> key; entries keep the metric alive so ids stay unique
        self._keys_by_id: dict[int, LabelSetKey] = {}

    def get_or_create(
        self,
        key: LabelSetKey,
        labels: tuple[Label, ...],
        factory: Callable[[], M],
    ) -> tuple[M, bool]:
        """Return the metric for *key*, building it with *factory* if absent.

        The factory runs under the store lock, so concurrent first accesses of
        one key build exactly one instance.  A factory error leaves the store
        unchanged.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                return entry.metric, False
            metric = factory()
            self._entries[key] = StoreEntry(labels=labels, metric=metric)
            self._keys_by_id[id(metric)] = key
            return metric, True

    def get(self, key: LabelSetKey) -> M | None:
        with self._lock:
            entry = self._entries.get(key)
            return entry.metric if entry is not None else None

    def remove(self, identity: LabelSetKey | M | None) -> StoreEntry[M] | None:
        """Detach the metric identified by a key or by the metric itself.

        Unknown identities and ``None`` are ignored.  Returns the removed
        entry, or ``None`` when nothing was removed.
        """
        if identity is None:
            return None
        with self._lock:
            if isinstance(identity, LabelSetKey):
                key: LabelSetKey | None = identity
            else:
                key = self._keys_by_id.get(id(identity))
            if key is None:
                return None
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not isinstance(identity, LabelSetKey) and entry.metric is not identity:
                return None
            del self._entries[key]
            del self._keys_by_id[id(entry.metric)]
            return entry

    def snapshot(self) -> list[StoreEntry[M]]:
        """Point-in-time list of registered entries, in creation order."""
        with self._lock:
            return list(self._entries.values())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._keys_by_id.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


__all__ = ["MetricStore", "StoreEntry"]
