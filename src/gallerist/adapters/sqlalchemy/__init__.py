"""SQLAlchemy adapter package for gallerist."""

from __future__ import annotations

from .mappings import create_all_tables, gallery_record_table, mapper_registry, start_mappers
from .repositories import SqlAlchemyGalleryRecordRepository
from .unit_of_work import SqlAlchemyGalleryUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "SqlAlchemyGalleryRecordRepository",
    "SqlAlchemyGalleryUnitOfWork",
    "StartupError",
    "create_all_tables",
    "gallery_record_table",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
