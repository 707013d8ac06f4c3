"""Environment gating."""

from __future__ import annotations

import os
from typing import Mapping

from request_chaos.chaos.policy import ChaosPolicy


def current_environment(
    policy: ChaosPolicy, environ: Mapping[str, str] | None = None
) -> str | None:
    """Return the environment name the policy reads, lower-cased, or None if unset."""
    env = os.environ if environ is None else environ
    value = env.get(policy.environment_variable)
    if value is None:
        return None
    return value.strip().lower()


def is_blocked_environment(
    policy: ChaosPolicy, environ: Mapping[str, str] | None = None
) -> bool:
    """True if chaos must stay inert in the current environment."""
    name = current_environment(policy, environ)
    return name is not None and name in policy.blocked_environments
