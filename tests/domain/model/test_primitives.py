from __future__ import annotations

import pytest

from gallerist.domain.model import CoverFingerprint, copy_tag_groups, is_valid_token
from tests.helpers.galleries import COVER_FINGERPRINT


def test_cover_fingerprint_parses_all_parts() -> None:
    fingerprint = CoverFingerprint.parse(COVER_FINGERPRINT)

    assert fingerprint.sha1 == "7dd3e4a62807a6938910a14407d9867b18a58a9f"
    assert fingerprint.size == 2333088
    assert fingerprint.width == 2831
    assert fingerprint.height == 4015
    assert fingerprint.format == "jpg"
    assert fingerprint.aspect_ratio == pytest.approx(2831 / 4015)
    assert str(fingerprint) == COVER_FINGERPRINT


@pytest.mark.parametrize(
    "value",
    [
        "",
        "7dd3e4a6-2333088-2831-4015-jpg",
        "7dd3e4a62807a6938910a14407d9867b18a58a9f-2333088-2831-jpg",
        "7DD3E4A62807A6938910A14407D9867B18A58A9F-2333088-2831-4015-jpg",
    ],
)
def test_cover_fingerprint_rejects_malformed_values(value: str) -> None:
    with pytest.raises(ValueError, match="Invalid cover fingerprint"):
        CoverFingerprint.parse(value)


def test_cover_fingerprint_with_zero_height_has_no_ratio() -> None:
    fingerprint = CoverFingerprint.parse("7dd3e4a62807a6938910a14407d9867b18a58a9f-1-10-0-png")

    assert fingerprint.aspect_ratio is None


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("c219d2cf41", True),
        ("C219D2CF41", False),
        ("c219d2cf4", False),
        ("c219d2cf41a", False),
        ("c219d2cf4g", False),
    ],
)
def test_is_valid_token(token: str, *, expected: bool) -> None:
    assert is_valid_token(token) is expected


def test_copy_tag_groups_keeps_order_and_shares_nothing() -> None:
    tags = {"parody": ["a"], "artist": ["b", "c"]}

    copied = copy_tag_groups(tags)
    copied["artist"].append("d")

    assert list(copied) == ["parody", "artist"]
    assert tags["artist"] == ["b", "c"]
