"""Versioned JSON store adapter."""

from __future__ import annotations

from .schema import STORE_NAME, STORE_VERSION, GalleryRecordPayload, GalleryStoreDocument
from .store import (
    JsonGalleryStore,
    StoreError,
    StoreNameError,
    UnsupportedStoreVersionError,
    dumps_records,
    loads_records,
)

__all__ = [
    "STORE_NAME",
    "STORE_VERSION",
    "GalleryRecordPayload",
    "GalleryStoreDocument",
    "JsonGalleryStore",
    "StoreError",
    "StoreNameError",
    "UnsupportedStoreVersionError",
    "dumps_records",
    "loads_records",
]
