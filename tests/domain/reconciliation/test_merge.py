from __future__ import annotations

import logging
from dataclasses import fields

import pytest

from gallerist.domain.model import (
    MERGEABLE_FIELDS,
    Category,
    GalleryRecord,
    IdentityPolicy,
    Language,
)
from gallerist.domain.reconciliation import (
    IdentityMismatchError,
    PreconditionError,
    merge_record,
)
from tests.helpers.galleries import make_full_record, make_record

MERGE_LOGGER = "gallerist.domain.reconciliation.merge"


def test_known_incoming_values_fill_unknown_target_fields() -> None:
    target = make_record()
    incoming = make_record(rating=4.5, tag_groups={"artist": ["x"]})

    merge_record(target, incoming)

    assert target.rating == 4.5
    assert target.page_count is None
    assert target.tag_groups == {"artist": ["x"]}


def test_unknown_incoming_values_keep_target_values() -> None:
    target = make_full_record()
    expected = target.copy()

    merge_record(target, make_record())

    assert target == expected


def test_incoming_wins_when_both_sides_know_a_value() -> None:
    target = make_full_record()
    incoming = make_full_record(
        primary_title="New Title",
        rating=2.0,
        category=Category.DOUJINSHI,
        language=Language.JAPANESE,
        favorite_slot=0,
        page_count=30,
        torrent_count=5,
    )

    merge_record(target, incoming)

    assert target.primary_title == "New Title"
    assert target.rating == 2.0
    assert target.category is Category.DOUJINSHI
    assert target.language is Language.JAPANESE
    assert target.favorite_slot == 0
    assert target.page_count == 30
    assert target.torrent_count == 5


def test_zero_values_count_as_known() -> None:
    target = make_record(torrent_count=3, favorite_slot=4, posted_at=1)

    merge_record(target, make_record(torrent_count=0, favorite_slot=0, posted_at=0))

    assert target.torrent_count == 0
    assert target.favorite_slot == 0
    assert target.posted_at == 0


def test_empty_strings_do_not_overwrite_known_titles() -> None:
    target = make_record(primary_title="Title", uploader="someone")

    merge_record(target, make_record(primary_title="", uploader=""))

    assert target.primary_title == "Title"
    assert target.uploader == "someone"


@pytest.mark.parametrize(
    ("target_invalid", "incoming_invalid", "expected"),
    [
        (False, False, False),
        (False, True, True),
        (True, False, True),
        (True, True, True),
    ],
)
def test_invalid_flag_is_or_merged(
    *, target_invalid: bool, incoming_invalid: bool, expected: bool
) -> None:
    target = make_record(invalid=target_invalid)

    merge_record(target, make_record(invalid=incoming_invalid))

    assert target.invalid is expected


def test_non_empty_tags_replace_target_tags_entirely() -> None:
    target = make_record(tag_groups={"parody": ["a"], "artist": ["b"]})
    incoming = make_record(tag_groups={"female": ["c"], "artist": ["d"]})

    merge_record(target, incoming)

    assert target.tag_groups == {"female": ["c"], "artist": ["d"]}
    assert list(target.tag_groups) == ["female", "artist"]


def test_empty_incoming_tags_keep_target_tags() -> None:
    target = make_record(tag_groups={"artist": ["b"]})

    merge_record(target, make_record())

    assert target.tag_groups == {"artist": ["b"]}


def test_merged_tags_do_not_alias_incoming() -> None:
    target = make_record()
    incoming = make_record(tag_groups={"artist": ["x"]})

    merge_record(target, incoming)
    target.tag_groups["artist"].append("y")
    target.tag_groups["group"] = ["z"]
    incoming.tag_groups["artist"].append("w")

    assert incoming.tag_groups == {"artist": ["x", "w"]}
    assert target.tag_groups == {"artist": ["x", "y"], "group": ["z"]}


def test_incoming_is_not_modified() -> None:
    target = make_full_record(rating=1.0, tag_groups={"parody": ["p"]}, invalid=True)
    incoming = make_full_record(invalid=False, favorite_slot=None)
    snapshot = incoming.copy()

    merge_record(target, incoming)

    assert incoming == snapshot


def test_merging_a_copy_of_itself_changes_nothing() -> None:
    record = make_full_record()
    snapshot = record.copy()

    merge_record(record, record.copy())

    assert record == snapshot


def test_merging_a_record_into_itself_keeps_tags() -> None:
    record = make_full_record()
    snapshot = record.copy()

    merge_record(record, record)

    assert record == snapshot


@pytest.mark.parametrize("field_name", MERGEABLE_FIELDS)
def test_merge_never_loses_a_known_field(field_name: str) -> None:
    known = make_full_record()
    for target, incoming in (
        (known.copy(), make_record()),
        (make_record(), known.copy()),
    ):
        merge_record(target, incoming)

        assert field_name in target.known_fields()


def test_identity_is_never_changed_by_merge() -> None:
    target = make_record(1, "abcdef0123")

    merge_record(target, make_full_record(2, "0123456789"))

    assert target.identity == (1, "abcdef0123")


def test_absent_incoming_is_a_no_op() -> None:
    target = make_full_record()
    snapshot = target.copy()

    merge_record(target, None)

    assert target == snapshot


def test_absent_target_is_a_precondition_error() -> None:
    with pytest.raises(PreconditionError, match="target"):
        merge_record(None, make_record())  # pyright: ignore[reportArgumentType]


def test_mismatched_identity_warns_and_merges_anyway(caplog: pytest.LogCaptureFixture) -> None:
    target = make_record(1, "abcdef0123")
    incoming = make_record(2, "0123456789", rating=3.0)

    with caplog.at_level(logging.WARNING, logger=MERGE_LOGGER):
        merge_record(target, incoming)

    assert target.rating == 3.0
    assert any("Can't merge different galleries" in message for message in caplog.messages)


def test_matching_identity_does_not_warn(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger=MERGE_LOGGER):
        merge_record(make_record(), make_record(rating=3.0))

    assert caplog.records == []


def test_strict_policy_rejects_mismatch_without_touching_target() -> None:
    target = make_record(1, "abcdef0123", rating=1.0)
    snapshot = target.copy()

    with pytest.raises(IdentityMismatchError) as excinfo:
        merge_record(
            target,
            make_record(2, "abcdef0123", rating=3.0),
            policy=IdentityPolicy.STRICT,
        )

    assert target == snapshot
    assert excinfo.value.target == (1, "abcdef0123")
    assert excinfo.value.incoming == (2, "abcdef0123")


def test_strict_policy_merges_matching_records() -> None:
    target = make_record()

    merge_record(target, make_record(page_count=12), policy=IdentityPolicy.STRICT)

    assert target.page_count == 12


def test_every_record_field_is_either_identity_or_mergeable() -> None:
    names = {f.name for f in fields(GalleryRecord)}

    assert names == {"id", "token", *MERGEABLE_FIELDS}


def test_empty_url_and_archive_key_never_overwrite() -> None:
    target = make_record(cover_url="https://example.org/c.jpg", archive_key="400411--abc")

    merge_record(target, make_record(cover_url="", archive_key=""))

    assert target.cover_url == "https://example.org/c.jpg"
    assert target.archive_key == "400411--abc"
