from request_chaos.chaos import ChaosDecision, ChaosPolicy, PolicyBuilder, chaos
from request_chaos.config import load_policy, policy_from_env
from request_chaos.core.engine import ChaosEngine
from request_chaos.core.recorder import Recorder
from request_chaos.errors import ChaosError, PolicyError
from request_chaos.middleware import ChaosMiddleware, WSGIChaosMiddleware
from request_chaos.types import ChaosAction, SkipReason

__all__ = [
    "ChaosPolicy",
    "ChaosDecision",
    "PolicyBuilder",
    "chaos",
    "ChaosEngine",
    "Recorder",
    "ChaosMiddleware",
    "WSGIChaosMiddleware",
    "ChaosAction",
    "SkipReason",
    "ChaosError",
    "PolicyError",
    "policy_from_env",
    "load_policy",
]
