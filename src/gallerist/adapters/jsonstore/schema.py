"""Pydantic models describing the versioned gallery store document."""

from __future__ import annotations

from dataclasses import fields
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gallerist.domain.model import Category, GalleryRecord, Language

STORE_NAME: Final[str] = "gallerist:GalleryRecord"
STORE_VERSION: Final[int] = 1


def _empty_to_none(value: object) -> object:
    if value == "":
        return None
    return value


class StoreBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class GalleryRecordPayload(StoreBaseModel):
    id: int
    token: str = Field(min_length=1)
    primary_title: str | None = None
    secondary_title: str | None = None
    cover_fingerprint: str | None = None
    cover_url: str | None = None
    cover_ratio: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    category: Category | None = None
    posted_at: int | None = None
    uploader: str | None = None
    rating: float | None = Field(default=None, ge=0.5, le=5.0, allow_inf_nan=False)
    language: Language | None = None
    favorite_slot: int | None = Field(default=None, ge=0, le=9)
    invalid: bool = False
    archive_key: str | None = None
    page_count: int | None = Field(default=None, ge=0)
    byte_size: int | None = Field(default=None, ge=0)
    torrent_count: int | None = Field(default=None, ge=0)
    tag_groups: dict[str, list[str]] = Field(default_factory=dict[str, list[str]])

    _normalize_strings = field_validator(
        "primary_title",
        "secondary_title",
        "cover_fingerprint",
        "cover_url",
        "uploader",
        "archive_key",
        mode="before",
    )(_empty_to_none)

    @field_validator("category", "language")
    @classmethod
    def _reject_unknown_member(cls, value: Category | Language | None) -> object:
        if value is not None and value.name == "UNKNOWN":
            raise ValueError("use null for an unknown value")
        return value

    @classmethod
    def from_record(cls, record: GalleryRecord) -> GalleryRecordPayload:
        return cls.model_validate({f.name: getattr(record, f.name) for f in fields(record)})

    def to_record(self) -> GalleryRecord:
        return GalleryRecord(**self.model_dump())


class GalleryStoreDocument(StoreBaseModel):
    name: str
    version: int = Field(ge=1)
    items: list[GalleryRecordPayload] = Field(default_factory=list[GalleryRecordPayload])
