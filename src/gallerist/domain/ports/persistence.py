"""Ports for persisting gallery records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from gallerist.domain.model import GalleryRecord, Identity


@runtime_checkable
class GalleryRecordRepository(Protocol):
    """Persistence contract for gallery records keyed by identity."""

    def add(self, record: GalleryRecord) -> None: ...

    def get(self, identity: Identity) -> GalleryRecord | None: ...

    def list(self) -> list[GalleryRecord]: ...


@runtime_checkable
class GalleryUnitOfWork(Protocol):
    """Unit-of-work boundary around the gallery repository."""

    @property
    def galleries(self) -> GalleryRecordRepository: ...

    def __enter__(self) -> GalleryUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
