"""Domain ports."""

from __future__ import annotations

from .persistence import GalleryRecordRepository, GalleryUnitOfWork

__all__ = [
    "GalleryRecordRepository",
    "GalleryUnitOfWork",
]
