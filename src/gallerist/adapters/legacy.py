"""Translate the legacy sentinel layout to and from ``GalleryRecord``.

Older producers emit flat mappings where "unknown" is an in-range value:
``None`` for strings, NaN for floats, ``-1`` or ``0`` for integers, a reserved
member for enums and ``{}`` for tags. The domain uses ``None`` throughout, so the
sentinels are resolved here and nowhere else.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Final, cast

from gallerist.domain.model import (
    Category,
    GalleryRecord,
    Language,
    copy_tag_groups,
    is_valid_token,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

# domain attribute -> legacy key
LEGACY_KEYS: Final[dict[str, str]] = {
    "id": "gid",
    "token": "token",
    "primary_title": "title",
    "secondary_title": "titleJpn",
    "cover_fingerprint": "cover",
    "cover_url": "coverUrl",
    "cover_ratio": "coverRatio",
    "category": "category",
    "posted_at": "date",
    "uploader": "uploader",
    "rating": "rating",
    "language": "language",
    "favorite_slot": "favouriteSlot",
    "invalid": "invalid",
    "archive_key": "archiverKey",
    "page_count": "pages",
    "byte_size": "size",
    "torrent_count": "torrentCount",
    "tag_groups": "tags",
}

_INT_SENTINELS: Final[dict[str, int]] = {
    "posted_at": 0,
    "favorite_slot": -1,
    "page_count": -1,
    "byte_size": -1,
    "torrent_count": 0,
}
_FLOAT_FIELDS: Final[tuple[str, ...]] = ("cover_ratio", "rating")
_STRING_FIELDS: Final[tuple[str, ...]] = (
    "primary_title",
    "secondary_title",
    "cover_fingerprint",
    "cover_url",
    "uploader",
    "archive_key",
)


def from_legacy(payload: Mapping[str, Any]) -> GalleryRecord:
    """Build a record from a legacy mapping, turning sentinels into ``None``."""

    try:
        values: dict[str, Any] = {
            "id": int(payload["gid"]),
            "token": str(payload["token"]),
        }
    except KeyError as exc:
        raise ValueError(f"Legacy gallery payload is missing {exc.args[0]!r}") from exc
    if not is_valid_token(values["token"]):
        raise ValueError(f"Legacy gallery payload has a malformed token: {values['token']!r}")

    for name in _STRING_FIELDS:
        value = payload.get(LEGACY_KEYS[name])
        values[name] = value or None
    for name in _FLOAT_FIELDS:
        value = payload.get(LEGACY_KEYS[name])
        values[name] = None if value is None or math.isnan(value) else float(value)
    for name, sentinel in _INT_SENTINELS.items():
        value = payload.get(LEGACY_KEYS[name])
        values[name] = None if value is None or value == sentinel else int(value)

    category = payload.get("category")
    values["category"] = (
        None if category is None or category == Category.UNKNOWN else Category(category)
    )
    language = payload.get("language")
    values["language"] = (
        None if language is None or language == Language.UNKNOWN else Language(language)
    )
    values["invalid"] = bool(payload.get("invalid", False))
    tags = cast("Mapping[str, Sequence[str]]", payload.get("tags") or {})
    values["tag_groups"] = copy_tag_groups(tags)
    return GalleryRecord(**values)


def to_legacy(record: GalleryRecord) -> dict[str, Any]:
    """Encode ``record`` in the legacy layout, writing sentinels for unknown fields."""

    payload: dict[str, Any] = {
        "gid": record.id,
        "token": record.token,
    }
    for name in _STRING_FIELDS:
        payload[LEGACY_KEYS[name]] = getattr(record, name)
    for name in _FLOAT_FIELDS:
        value = getattr(record, name)
        payload[LEGACY_KEYS[name]] = math.nan if value is None else value
    for name, sentinel in _INT_SENTINELS.items():
        value = getattr(record, name)
        payload[LEGACY_KEYS[name]] = sentinel if value is None else value
    payload["category"] = int(record.category or Category.UNKNOWN)
    payload["language"] = int(Language.UNKNOWN if record.language is None else record.language)
    payload["invalid"] = record.invalid
    payload["tags"] = copy_tag_groups(record.tag_groups)
    return payload
