"""File-backed, versioned store of gallery records."""

from __future__ import annotations

import os
import tempfile
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import STORE_NAME, STORE_VERSION, GalleryRecordPayload, GalleryStoreDocument

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gallerist.domain.model import GalleryRecord

log = getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when a store document cannot be read or validated."""


class StoreNameError(StoreError):
    """Raised when a document holds something other than gallery records."""


class UnsupportedStoreVersionError(StoreError):
    """Raised when a document was written by a newer schema version."""


def dumps_records(records: Iterable[GalleryRecord], *, indent: int | None = None) -> str:
    try:
        items = [GalleryRecordPayload.from_record(record) for record in records]
    except ValidationError as exc:
        raise StoreError(f"Gallery record cannot be stored: {exc}") from exc
    document = GalleryStoreDocument(name=STORE_NAME, version=STORE_VERSION, items=items)
    return document.model_dump_json(indent=indent)


def loads_records(text: str | bytes) -> list[GalleryRecord]:
    try:
        document = GalleryStoreDocument.model_validate_json(text)
    except ValidationError as exc:
        raise StoreError(f"Invalid gallery store document: {exc}") from exc
    _check_header(document)
    return [item.to_record() for item in document.items]


def _check_header(document: GalleryStoreDocument) -> None:
    if document.name != STORE_NAME:
        raise StoreNameError(f"Expected a {STORE_NAME!r} document, got {document.name!r}")
    if document.version > STORE_VERSION:
        raise UnsupportedStoreVersionError(
            f"Store version {document.version} is newer than supported version {STORE_VERSION}"
        )
    if document.version < STORE_VERSION:
        log.info("Reading gallery store version %s as version %s", document.version, STORE_VERSION)


class JsonGalleryStore:
    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[GalleryRecord]:
        if not self.path.exists():
            log.info("Gallery store %s does not exist yet", self.path)
            return []
        return loads_records(self.path.read_bytes())

    def save(self, records: Iterable[GalleryRecord]) -> None:
        """Write ``records`` atomically, replacing any previous document."""

        payload = dumps_records(records, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            tmp_path.replace(self.path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
