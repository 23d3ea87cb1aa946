"""Domain primitives: scalar aliases + small value objects.

Scalar aliases may be promoted to proper value objects later without changing imports.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

type GalleryId = int
type Token = str
type Identity = tuple[GalleryId, Token]
type TagGroups = dict[str, list[str]]

TOKEN_PATTERN: Final[str] = r"^[0-9a-f]{10}$"
COVER_FINGERPRINT_PATTERN: Final[str] = r"^([0-9a-f]{40})-(\d+)-(\d+)-(\d+)-([0-9a-z]+)$"

_TOKEN_RE = re.compile(TOKEN_PATTERN)
_COVER_FINGERPRINT_RE = re.compile(COVER_FINGERPRINT_PATTERN)


def is_valid_token(value: str) -> bool:
    return _TOKEN_RE.match(value) is not None


def copy_tag_groups(tags: Mapping[str, Sequence[str]]) -> TagGroups:
    """Return a copy of ``tags`` that shares no list with the original."""

    return {group: list(values) for group, values in tags.items()}


@dataclass(frozen=True)
class CoverFingerprint:
    """Fingerprint of a gallery's first image: ``sha1-size-width-height-format``."""

    sha1: str
    size: int
    width: int
    height: int
    format: str

    @classmethod
    def parse(cls, value: str) -> CoverFingerprint:
        match = _COVER_FINGERPRINT_RE.match(value)
        if match is None:
            raise ValueError(f"Invalid cover fingerprint: {value!r}")
        sha1, size, width, height, format_ = match.groups()
        return cls(
            sha1=sha1,
            size=int(size),
            width=int(width),
            height=int(height),
            format=format_,
        )

    @property
    def aspect_ratio(self) -> float | None:
        if self.height == 0:
            return None
        return self.width / self.height

    def __str__(self) -> str:
        return f"{self.sha1}-{self.size}-{self.width}-{self.height}-{self.format}"
