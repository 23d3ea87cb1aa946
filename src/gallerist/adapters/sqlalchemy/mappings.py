"""SQLAlchemy mapping metadata for gallery records."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING

from sqlalchemy import (
    JSON,
    BigInteger,
    Boolean,
    Column,
    Dialect,
    Float,
    Integer,
    String,
    Table,
    TypeDecorator,
    orm,
)
from sqlalchemy.orm import configure_mappers

from gallerist.domain.model import Category, GalleryRecord, Language

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class IntEnumType[E: IntEnum](TypeDecorator[E]):
    impl = Integer
    cache_ok = True

    def __init__(self, enum_cls: type[E]) -> None:
        super().__init__()
        self.enum_cls = enum_cls

    def process_bind_param(self, value: E | int | None, dialect: Dialect) -> int | None:
        _ = dialect
        if value is None:
            return None
        return int(value)

    def process_result_value(self, value: int | None, dialect: Dialect) -> E | None:
        _ = dialect
        if value is None:
            return None
        return self.enum_cls(value)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

gallery_record_table = Table(
    "gallery_record",
    mapper_registry.metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=False),
    Column("token", String(10), primary_key=True),
    Column("primary_title", String),
    Column("secondary_title", String),
    Column("cover_fingerprint", String),
    Column("cover_url", String),
    Column("cover_ratio", Float),
    Column("category", IntEnumType(Category)),
    Column("posted_at", BigInteger),
    Column("uploader", String),
    Column("rating", Float),
    Column("language", IntEnumType(Language)),
    Column("favorite_slot", Integer),
    Column("invalid", Boolean, nullable=False, default=False),
    Column("archive_key", String),
    Column("page_count", Integer),
    Column("byte_size", BigInteger),
    Column("torrent_count", Integer),
    Column("tag_groups", JSON, nullable=False),
)


def start_mappers() -> orm.registry:
    """Map the domain model onto the tables (idempotent)."""
    if getattr(start_mappers, "_started", False):
        return mapper_registry
    log.info("Starting mappers")
    mapper_registry.map_imperatively(GalleryRecord, gallery_record_table)
    configure_mappers()
    start_mappers.__dict__["_started"] = True
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create all tables."""
    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
