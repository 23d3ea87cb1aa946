"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Category(IntEnum):
    """Gallery category. Values are bit flags so they can be combined in search filters."""

    MISC = 0x1
    DOUJINSHI = 0x2
    MANGA = 0x4
    ARTIST_CG = 0x8
    GAME_CG = 0x10
    IMAGE_SET = 0x20
    COSPLAY = 0x40
    ASIAN_PORN = 0x80
    NON_H = 0x100
    WESTERN = 0x200
    PRIVATE = 0x400
    # legacy sentinel; domain records use None instead
    UNKNOWN = 0x800


class Language(IntEnum):
    JAPANESE = 0
    ENGLISH = 1
    CHINESE = 2
    DUTCH = 3
    FRENCH = 4
    GERMAN = 5
    HUNGARIAN = 6
    ITALIAN = 7
    KOREAN = 8
    POLISH = 9
    PORTUGUESE = 10
    RUSSIAN = 11
    SPANISH = 12
    THAI = 13
    VIETNAMESE = 14
    # legacy sentinel; domain records use None instead
    UNKNOWN = -1


class IdentityPolicy(StrEnum):
    """How a merge reacts when target and incoming describe different galleries."""

    PERMISSIVE = "permissive"
    STRICT = "strict"
