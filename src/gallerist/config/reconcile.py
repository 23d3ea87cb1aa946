"""Reconciliation defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from gallerist.domain.model.enums import IdentityPolicy

from .env import optional_env_var
from .errors import ConfigurationError

IDENTITY_POLICY_ENV: Final[str] = "GALLERIST_IDENTITY_POLICY"


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    identity_policy: IdentityPolicy = IdentityPolicy.PERMISSIVE


def get_reconcile_config() -> ReconcileConfig:
    raw = optional_env_var(IDENTITY_POLICY_ENV)
    if raw is None:
        return ReconcileConfig()
    try:
        policy = IdentityPolicy(raw.lower())
    except ValueError as exc:
        choices = ", ".join(member.value for member in IdentityPolicy)
        raise ConfigurationError(
            f"Invalid {IDENTITY_POLICY_ENV}={raw!r}; expected one of: {choices}"
        ) from exc
    return ReconcileConfig(identity_policy=policy)
