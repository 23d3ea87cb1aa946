"""Merge partial gallery records observed from independent sources.

Every field is handled the same way: a known incoming value replaces the
target's value, an unknown one leaves it alone. Because ``False`` counts as
unknown, ``invalid`` ends up OR-ed, and because an empty mapping counts as
unknown, tag groups are replaced all-or-nothing.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from gallerist.domain.model import (
    MERGEABLE_FIELDS,
    IdentityPolicy,
    copy_tag_groups,
    is_known,
)

from .errors import IdentityMismatchError, PreconditionError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gallerist.domain.model import GalleryRecord

log = getLogger(__name__)


def merge_record(
    target: GalleryRecord,
    incoming: GalleryRecord | None,
    *,
    policy: IdentityPolicy = IdentityPolicy.PERMISSIVE,
) -> None:
    """Merge the known fields of ``incoming`` into ``target`` in place.

    ``incoming`` is never modified. In permissive mode a different identity only
    logs a warning; in strict mode it raises before ``target`` is touched.
    """

    if target is None:  # pyright: ignore[reportUnnecessaryComparison]
        raise PreconditionError("merge target must not be None")
    if incoming is None:
        return
    check_identity(target, incoming, policy=policy)

    updated: list[str] = []
    for name in MERGEABLE_FIELDS:
        value = getattr(incoming, name)
        if not is_known(value):
            continue
        if name == "tag_groups":
            value = copy_tag_groups(value)
        setattr(target, name, value)
        updated.append(name)

    if updated:
        log.debug("Merged %s into gallery %s/%s", ", ".join(updated), target.id, target.token)


def merge_first_match(
    target: GalleryRecord,
    candidates: Iterable[GalleryRecord | None] | None,
    *,
    policy: IdentityPolicy = IdentityPolicy.PERMISSIVE,
) -> GalleryRecord | None:
    """Merge the first candidate sharing ``target``'s identity and return it.

    Later candidates with the same identity are ignored. Returns ``None`` when
    nothing matched.
    """

    if candidates is None:
        return None
    for candidate in candidates:
        if candidate is not None and target.same_entity(candidate):
            merge_record(target, candidate, policy=policy)
            return candidate
    return None


def check_identity(
    target: GalleryRecord,
    incoming: GalleryRecord,
    *,
    policy: IdentityPolicy = IdentityPolicy.PERMISSIVE,
) -> bool:
    """Return whether both records share an identity, enforcing ``policy`` if not."""

    if target.same_entity(incoming):
        return True
    if policy is IdentityPolicy.STRICT:
        raise IdentityMismatchError(target.identity, incoming.identity)
    log.warning(
        "Can't merge different galleries: %s/%s into %s/%s, merging anyway",
        incoming.id,
        incoming.token,
        target.id,
        target.token,
    )
    return False
