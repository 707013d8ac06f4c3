"""Fluent builder for chaos policies."""

from typing import Any, Self

from request_chaos.chaos.policy import ChaosPolicy


class PolicyBuilder:
    """Fluent builder for chaos configuration.

    Usage:
        chaos()
            .with_latency_range(100, 500)
            .with_error_rate(0.1)
            .for_methods("GET", "POST")
            .build()
    """

    def __init__(self, **defaults: Any):
        self._config: dict[str, Any] = defaults

    def with_latency(self, ms: float) -> Self:
        """Delay every eligible request by a fixed number of milliseconds."""
        self._config["latency"] = ms
        return self

    def with_latency_range(self, min_ms: int, max_ms: int) -> Self:
        """Delay by a random whole number of milliseconds in [min_ms, max_ms]."""
        self._config["latency"] = (min_ms, max_ms)
        return self

    def with_latency_rate(self, p: float) -> Self:
        """Apply latency with given probability (0.0-1.0)."""
        self._config["latency_rate"] = p
        return self

    def with_error_rate(self, p: float) -> Self:
        """Inject errors with given probability (0.0-1.0)."""
        self._config["error_rate"] = p
        return self

    def with_error(self, status: int, body: str = "") -> Self:
        """Customize the synthetic error response."""
        self._config["error_status"] = status
        self._config["error_body"] = body
        return self

    def delaying_errors(self) -> Self:
        """Delay injected errors too, instead of failing fast."""
        self._config["delay_errors"] = True
        return self

    def for_methods(self, *methods: str) -> Self:
        """Target specific HTTP methods only."""
        self._config["methods"] = frozenset(methods)
        return self

    def excluding_paths(self, *prefixes: str) -> Self:
        """Never touch requests whose path starts with one of these prefixes."""
        self._config["exclude_paths"] = tuple(prefixes)
        return self

    def blocked_in(self, *environments: str) -> Self:
        """Replace the environments where chaos is inert."""
        self._config["blocked_environments"] = frozenset(environments)
        return self

    def reading_environment_from(self, variable: str) -> Self:
        """Read the current environment name from this env var."""
        self._config["environment_variable"] = variable
        return self

    def seeded(self, seed: int) -> Self:
        """Make sampling reproducible."""
        self._config["seed"] = seed
        return self

    def disabled(self) -> Self:
        """Turn the policy off."""
        self._config["enabled"] = False
        return self

    def build(self) -> ChaosPolicy:
        """Build the policy instance."""
        return ChaosPolicy(**self._config)


def chaos(**defaults: Any) -> PolicyBuilder:
    """Start building a chaos policy."""
    return PolicyBuilder(**defaults)
