"""Reconciliation of partial gallery records from independent sources.

Flow:
1) a producer builds a ``GalleryRecord`` with whatever fields its source exposes
2) ``merge_record`` folds the known fields of a newer record into an existing one
3) ``merge_first_match`` does the same for the first same-identity record of a batch
4) ``Reconciler`` wraps both with per-gallery ownership and a configured identity policy
"""

from __future__ import annotations

from .errors import IdentityMismatchError, PreconditionError, ReconciliationError
from .merge import check_identity, merge_first_match, merge_record
from .reconciler import Reconciler

__all__ = [
    "IdentityMismatchError",
    "PreconditionError",
    "ReconciliationError",
    "Reconciler",
    "check_identity",
    "merge_first_match",
    "merge_record",
]
