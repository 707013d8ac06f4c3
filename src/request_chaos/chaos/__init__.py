"""Chaos policy types and factories.

Usage:
    from request_chaos import ChaosMiddleware, chaos

    app.add_middleware(
        ChaosMiddleware,
        policy=chaos().with_latency_range(100, 500).with_error_rate(0.05),
    )
"""

from request_chaos.chaos.builder import PolicyBuilder, chaos
from request_chaos.chaos.decision import ChaosDecision
from request_chaos.chaos.policy import ChaosPolicy

__all__ = [
    "ChaosPolicy",
    "ChaosDecision",
    "PolicyBuilder",
    "chaos",
]
