"""Gallery record: everything currently known about one catalog gallery.

A record can be obtained three ways, and none of them fills every field:

- parsing a gallery list page
- parsing a gallery detail page
- the gallery metadata API

Unknown values are ``None``. ``invalid`` and ``tag_groups`` are the exceptions:
they default to ``False`` and an empty mapping.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Final

from gallerist.domain.model.primitives import copy_tag_groups

if TYPE_CHECKING:
    from gallerist.domain.model.enums import Category, Language
    from gallerist.domain.model.primitives import GalleryId, Identity, TagGroups, Token

MIN_RATING: Final[float] = 0.5
MAX_RATING: Final[float] = 5.0
MAX_FAVORITE_SLOT: Final[int] = 9


@dataclass(kw_only=True)
class GalleryRecord:
    id: GalleryId
    token: Token

    # one of the two titles should be known once a record leaves its producer
    primary_title: str | None = None
    secondary_title: str | None = None

    cover_fingerprint: str | None = None
    cover_url: str | None = None
    # cover width / cover height
    cover_ratio: float | None = None

    category: Category | None = None
    # epoch milliseconds
    posted_at: int | None = None
    uploader: str | None = None
    rating: float | None = None
    language: Language | None = None
    # None means not favorited
    favorite_slot: int | None = None

    # expunged, deleted or replaced; never reverts once set
    invalid: bool = False

    archive_key: str | None = None
    page_count: int | None = None
    byte_size: int | None = None
    torrent_count: int | None = None

    tag_groups: TagGroups = field(default_factory=dict[str, list[str]])

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("token must not be empty")
        if self.rating is not None and (
            math.isnan(self.rating) or not MIN_RATING <= self.rating <= MAX_RATING
        ):
            raise ValueError(f"rating must be within [{MIN_RATING}, {MAX_RATING}]")
        if self.favorite_slot is not None and not 0 <= self.favorite_slot <= MAX_FAVORITE_SLOT:
            raise ValueError(f"favorite_slot must be within [0, {MAX_FAVORITE_SLOT}]")
        if self.cover_ratio is not None and not (
            math.isfinite(self.cover_ratio) and self.cover_ratio > 0
        ):
            raise ValueError("cover_ratio must be a positive finite number")
        for name in ("page_count", "byte_size", "torrent_count"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must not be negative")

    @property
    def identity(self) -> Identity:
        return (self.id, self.token)

    def same_entity(self, other: GalleryRecord) -> bool:
        """Return whether ``other`` describes the same gallery (id and token match)."""

        return self.id == other.id and self.token == other.token

    def copy(self) -> GalleryRecord:
        return replace(self, tag_groups=copy_tag_groups(self.tag_groups))

    def known_fields(self) -> tuple[str, ...]:
        """Names of the fields currently holding real data (identity excluded)."""

        return tuple(name for name in MERGEABLE_FIELDS if is_known(getattr(self, name)))


def is_known(value: object) -> bool:
    """Uniform presence test: ``None``, empty strings/mappings and ``False`` are unknown."""

    if value is None or value is False:
        return False
    if isinstance(value, str | dict):
        return bool(value)
    return True


IDENTITY_FIELDS: Final[tuple[str, ...]] = ("id", "token")
MERGEABLE_FIELDS: Final[tuple[str, ...]] = tuple(
    f.name for f in fields(GalleryRecord) if f.name not in IDENTITY_FIELDS
)
