"""Reconciliation error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gallerist.domain.model import Identity


class ReconciliationError(RuntimeError):
    """Base class for errors raised while reconciling gallery records."""


class PreconditionError(ReconciliationError, ValueError):
    """Raised when a merge is called without a target record."""


class IdentityMismatchError(ReconciliationError):
    """Raised in strict mode when target and incoming describe different galleries."""

    def __init__(self, target: Identity, incoming: Identity) -> None:
        super().__init__(
            f"Can't merge gallery {incoming[0]}/{incoming[1]} into gallery {target[0]}/{target[1]}"
        )
        self.target = target
        self.incoming = incoming
