"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from gallerist.adapters.jsonstore import JsonGalleryStore
from gallerist.adapters.sqlalchemy.unit_of_work import SqlAlchemyGalleryUnitOfWork
from gallerist.domain.reconciliation import Reconciler

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from gallerist.domain.model import GalleryRecord, Identity
    from gallerist.domain.ports import GalleryUnitOfWork

UnitOfWorkFactory = Callable[[], "GalleryUnitOfWork"]


log = getLogger(__name__)


@dataclass(slots=True)
class ReconcileResult:
    merged: int = 0
    added: int = 0
    total: int = 0


def reconcile_collections(
    existing: list[GalleryRecord],
    incoming: Sequence[GalleryRecord],
    *,
    reconciler: Reconciler,
) -> ReconcileResult:
    """Merge ``incoming`` into ``existing`` in place.

    Each existing record takes the first incoming record with its identity.
    Incoming records matching nothing are appended, first occurrence per identity.
    """

    result = ReconcileResult()
    known: set[Identity] = set()
    for record in existing:
        known.add(record.identity)
        if reconciler.merge_first_match(record, incoming) is not None:
            result.merged += 1

    for record in incoming:
        if record.identity in known:
            continue
        known.add(record.identity)
        existing.append(record.copy())
        result.added += 1

    result.total = len(existing)
    return result


def reconcile_json_store(
    store_path: Path,
    incoming_paths: Iterable[Path],
    *,
    reconciler: Reconciler | None = None,
) -> ReconcileResult:
    """Reconcile gallery documents at ``incoming_paths`` into the store at ``store_path``."""

    effective_reconciler = reconciler or Reconciler.from_config()
    store = JsonGalleryStore(store_path)
    existing = store.load()
    incoming = load_galleries(incoming_paths)
    log.info(
        "Reconciling %s incoming galleries into %s (%s stored, policy=%s)",
        len(incoming),
        store_path,
        len(existing),
        effective_reconciler.policy,
    )

    result = reconcile_collections(existing, incoming, reconciler=effective_reconciler)
    store.save(existing)

    log.info(
        "Finished reconciling: merged=%s, added=%s, total=%s",
        result.merged,
        result.added,
        result.total,
    )
    return result


def reconcile_into_database(
    records: Iterable[GalleryRecord],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    reconciler: Reconciler | None = None,
) -> ReconcileResult:
    """Merge ``records`` into persisted galleries, adding the ones not stored yet."""

    effective_reconciler = reconciler or Reconciler.from_config()
    effective_uow = unit_of_work_factory or SqlAlchemyGalleryUnitOfWork
    result = ReconcileResult()
    pending: dict[Identity, GalleryRecord] = {}
    with effective_uow() as uow:
        for record in records:
            stored = pending.get(record.identity) or uow.galleries.get(record.identity)
            if stored is None:
                pending[record.identity] = added = record.copy()
                uow.galleries.add(added)
                result.added += 1
                continue
            effective_reconciler.merge(stored, record)
            result.merged += 1
        uow.commit()
        result.total = len(uow.galleries.list())

    log.info(
        "Finished database reconcile: merged=%s, added=%s, total=%s",
        result.merged,
        result.added,
        result.total,
    )
    return result


def load_galleries(paths: Iterable[Path]) -> list[GalleryRecord]:
    """Load and concatenate the gallery documents at ``paths``; each must exist."""

    records: list[GalleryRecord] = []
    for path in paths:
        if not path.is_file():
            raise FileNotFoundError(f"Gallery document not found: {path}")
        loaded = JsonGalleryStore(path).load()
        log.debug("Loaded %s galleries from %s", len(loaded), path)
        records.extend(loaded)
    return records
