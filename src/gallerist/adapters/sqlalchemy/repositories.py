"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from gallerist.domain.model import GalleryRecord

from .mappings import gallery_record_table

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from gallerist.domain.model import Identity


class SqlAlchemyGalleryRecordRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, record: GalleryRecord) -> None:
        self.session.add(record)

    def get(self, identity: Identity) -> GalleryRecord | None:
        gid, token = identity
        return self.session.get(GalleryRecord, (gid, token))

    def list(self) -> list[GalleryRecord]:
        stmt = select(GalleryRecord).order_by(
            gallery_record_table.c.id, gallery_record_table.c.token
        )
        return list(self.session.execute(stmt).scalars())
