"""Public domain model surface."""

from __future__ import annotations

from gallerist.domain.model.enums import Category, IdentityPolicy, Language
from gallerist.domain.model.gallery import (
    IDENTITY_FIELDS,
    MERGEABLE_FIELDS,
    GalleryRecord,
    is_known,
)
from gallerist.domain.model.primitives import (
    CoverFingerprint,
    GalleryId,
    Identity,
    TagGroups,
    Token,
    copy_tag_groups,
    is_valid_token,
)

__all__ = [  # noqa: RUF022
    # gallery
    "GalleryRecord",
    "IDENTITY_FIELDS",
    "MERGEABLE_FIELDS",
    "is_known",
    # enums
    "Category",
    "IdentityPolicy",
    "Language",
    # primitives
    "CoverFingerprint",
    "GalleryId",
    "Identity",
    "TagGroups",
    "Token",
    "copy_tag_groups",
    "is_valid_token",
]
