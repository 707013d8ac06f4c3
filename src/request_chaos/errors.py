"""Exceptions raised by request-chaos."""


class ChaosError(Exception):
    """Base class for all request-chaos errors."""


class PolicyError(ChaosError, ValueError):
    """Raised when a policy cannot be read from the environment or a file."""
