"""Policy loading from environment variables and JSON files.

Supported sources:
- process environment (``CHAOS_*`` variables, see ``ENV_VARS``)
- a JSON document matching the ``ChaosPolicy`` schema
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from request_chaos.chaos.policy import ChaosPolicy
from request_chaos.errors import PolicyError

ENV_VARS: dict[str, str] = {
    "CHAOS_ENABLED": "enabled",
    "CHAOS_LATENCY": "latency",
    "CHAOS_LATENCY_RATE": "latency_rate",
    "CHAOS_ERROR_RATE": "error_rate",
    "CHAOS_ERROR_STATUS": "error_status",
    "CHAOS_ERROR_BODY": "error_body",
    "CHAOS_DELAY_ERRORS": "delay_errors",
    "CHAOS_METHODS": "methods",
    "CHAOS_EXCLUDE_PATHS": "exclude_paths",
    "CHAOS_BLOCKED_ENVIRONMENTS": "blocked_environments",
    "CHAOS_ENVIRONMENT_VARIABLE": "environment_variable",
    "CHAOS_SEED": "seed",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_EMPTY_IS_VALUE = {"blocked_environments", "error_body"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise PolicyError(f"{name}: expected a boolean, got {raw!r}")


def _parse_latency(name: str, raw: str) -> float | tuple[int, int]:
    """Parse ``"250"`` or ``"100-500"``."""
    value = raw.strip()
    try:
        if "-" in value.lstrip("-"):
            low, high = value.split("-", 1)
            return (int(low), int(high))
        return float(value)
    except ValueError:
        raise PolicyError(
            f"{name}: expected milliseconds or a 'min-max' range, got {raw!r}"
        ) from None


def _parse_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _parse_value(name: str, field: str, raw: str) -> Any:
    if field in ("enabled", "delay_errors"):
        return _parse_bool(name, raw)
    if field == "latency":
        return _parse_latency(name, raw)
    if field in ("methods", "exclude_paths", "blocked_environments"):
        return _parse_list(raw)
    if field in ("latency_rate", "error_rate"):
        try:
            return float(raw)
        except ValueError:
            raise PolicyError(f"{name}: expected a number, got {raw!r}") from None
    if field in ("error_status", "seed"):
        try:
            return int(raw)
        except ValueError:
            raise PolicyError(f"{name}: expected an integer, got {raw!r}") from None
    return raw


def policy_from_env(environ: Mapping[str, str] | None = None) -> ChaosPolicy:
    """Build a policy from ``CHAOS_*`` environment variables.

    Unset or empty variables keep the model defaults, except
    ``CHAOS_BLOCKED_ENVIRONMENTS`` and ``CHAOS_ERROR_BODY`` where empty is
    a meaningful value.

    Raises:
        PolicyError: If a variable can't be parsed or the result is invalid.
    """
    env = os.environ if environ is None else environ
    data: dict[str, Any] = {}
    for name, field in ENV_VARS.items():
        raw = env.get(name)
        if raw is None:
            continue
        if not raw.strip() and field not in _EMPTY_IS_VALUE:
            continue
        data[field] = _parse_value(name, field, raw)

    try:
        return ChaosPolicy.model_validate(data)
    except ValidationError as e:
        raise PolicyError(f"Invalid chaos policy from environment: {e}") from e


def load_policy(path: str | Path) -> ChaosPolicy:
    """Load a policy from a JSON file.

    Raises:
        PolicyError: If the file is missing or doesn't describe a valid policy.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise PolicyError(f"Policy file not found: {path}") from None

    try:
        return ChaosPolicy.model_validate_json(text)
    except ValidationError as e:
        raise PolicyError(f"Invalid chaos policy in {path}: {e}") from e
