"""Declarative chaos policy."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from request_chaos.types import Latency


class ChaosPolicy(BaseModel):
    """What chaos to inject and which requests it applies to.

    Attributes:
        enabled: Master switch. A disabled policy never injects anything.
        latency: Fixed delay in milliseconds, or an inclusive ``(min, max)``
            range sampled per request. ``None`` or ``0`` means no latency.
        latency_rate: Probability (0-1) that configured latency applies.
        error_rate: Probability (0-1) of answering with a synthetic error.
        error_status: HTTP status of the synthetic error.
        error_body: Body of the synthetic error response.
        delay_errors: If True, an injected error is delayed as well.
        methods: HTTP methods eligible for chaos. ``None`` means all.
        exclude_paths: Path prefixes never subject to chaos.
        blocked_environments: Environment names where chaos is inert.
        environment_variable: Process env var naming the current environment.
        seed: Seed for the engine's random generator.

    Example:
        policy = ChaosPolicy(latency=(100, 500), error_rate=0.1, methods={"GET"})
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    enabled: bool = True
    latency: Latency | None = None
    latency_rate: float = Field(default=1.0, ge=0.0, le=1.0)
    error_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    error_status: int = Field(default=500, ge=400, le=599)
    error_body: str = ""
    delay_errors: bool = False
    methods: frozenset[str] | None = None
    exclude_paths: tuple[str, ...] = ()
    blocked_environments: frozenset[str] = frozenset({"production"})
    environment_variable: str = Field(default="APP_ENV", min_length=1)
    seed: int | None = None

    @field_validator("latency")
    @classmethod
    def _check_latency(cls, v: Latency | None) -> Latency | None:
        if v is None:
            return v
        if isinstance(v, tuple):
            low, high = v
            if low < 0 or high < 0:
                raise ValueError("latency range bounds must be >= 0")
            if low > high:
                raise ValueError(f"latency range min ({low}) exceeds max ({high})")
            return v
        if not math.isfinite(v):
            raise ValueError("latency must be a finite number")
        if v < 0:
            raise ValueError("latency must be >= 0")
        return v

    @field_validator("methods")
    @classmethod
    def _normalize_methods(cls, v: frozenset[str] | None) -> frozenset[str] | None:
        if v is None:
            return v
        if not v:
            raise ValueError("methods must not be empty; use None to target all")
        return frozenset(m.strip().upper() for m in v)

    @field_validator("blocked_environments")
    @classmethod
    def _normalize_environments(cls, v: frozenset[str]) -> frozenset[str]:
        return frozenset(e.strip().lower() for e in v)

    @property
    def has_latency(self) -> bool:
        """True if any latency is configured."""
        if self.latency is None:
            return False
        if isinstance(self.latency, tuple):
            return self.latency[1] > 0
        return self.latency > 0

    @property
    def latency_bounds(self) -> tuple[float, float] | None:
        """The (min, max) delay in milliseconds, or None without latency."""
        if not self.has_latency:
            return None
        if isinstance(self.latency, tuple):
            return (float(self.latency[0]), float(self.latency[1]))
        return (float(self.latency), float(self.latency))

    def allows_method(self, method: str) -> bool:
        """Check whether a request method is eligible for chaos."""
        return self.methods is None or method.upper() in self.methods

    def excludes_path(self, path: str) -> bool:
        """Check whether a request path is exempt from chaos."""
        return any(path.startswith(prefix) for prefix in self.exclude_paths)
