"""Single-owner reconciler.

``merge_record`` is a sequence of independent field writes. The reconciler owns a
target for the duration of a merge by holding a lock per gallery identity, so
concurrent merges of the same gallery through one reconciler never interleave.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gallerist.config import get_reconcile_config
from gallerist.domain.model import IdentityPolicy

from .errors import PreconditionError
from .merge import merge_first_match, merge_record

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from gallerist.config import ReconcileConfig
    from gallerist.domain.model import GalleryRecord, Identity


@dataclass(slots=True)
class _IdentityLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


@dataclass(slots=True)
class Reconciler:
    policy: IdentityPolicy = IdentityPolicy.PERMISSIVE
    _locks: dict[Identity, _IdentityLock] = field(
        default_factory=dict["Identity", "_IdentityLock"], init=False, repr=False
    )
    _registry_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @classmethod
    def from_config(cls, config: ReconcileConfig | None = None) -> Reconciler:
        resolved = config or get_reconcile_config()
        return cls(policy=resolved.identity_policy)

    def merge(self, target: GalleryRecord, incoming: GalleryRecord | None) -> None:
        with self.owning(target):
            merge_record(target, incoming, policy=self.policy)

    def merge_first_match(
        self,
        target: GalleryRecord,
        candidates: Iterable[GalleryRecord | None] | None,
    ) -> GalleryRecord | None:
        with self.owning(target):
            return merge_first_match(target, candidates, policy=self.policy)

    def merged(self, target: GalleryRecord, incoming: GalleryRecord | None) -> GalleryRecord:
        """Return a merged copy of ``target``; neither input is modified."""

        with self.owning(target):
            result = target.copy()
        merge_record(result, incoming, policy=self.policy)
        return result

    @contextmanager
    def owning(self, target: GalleryRecord) -> Iterator[GalleryRecord]:
        """Hold exclusive ownership of ``target``'s identity while the block runs."""

        if target is None:  # pyright: ignore[reportUnnecessaryComparison]
            raise PreconditionError("merge target must not be None")
        identity = target.identity
        entry = self._acquire_entry(identity)
        try:
            with entry.lock:
                yield target
        finally:
            self._release_entry(identity, entry)

    def _acquire_entry(self, identity: Identity) -> _IdentityLock:
        with self._registry_lock:
            entry = self._locks.get(identity)
            if entry is None:
                entry = self._locks[identity] = _IdentityLock()
            entry.holders += 1
            return entry

    def _release_entry(self, identity: Identity, entry: _IdentityLock) -> None:
        # entries live only while some thread holds or waits on them
        with self._registry_lock:
            entry.holders -= 1
            if entry.holders == 0:
                del self._locks[identity]
