"""ASGI middleware (Starlette, FastAPI and any other ASGI host)."""

from __future__ import annotations

from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from request_chaos.chaos.builder import PolicyBuilder
from request_chaos.chaos.policy import ChaosPolicy
from request_chaos.core.delay import async_sleep_ms
from request_chaos.core.engine import ChaosEngine


def _engine_for(
    policy: ChaosPolicy | PolicyBuilder | None, engine: ChaosEngine | None
) -> ChaosEngine:
    if engine is not None:
        if policy is not None:
            raise TypeError("Pass either policy or engine, not both")
        return engine
    return ChaosEngine(policy)


class ChaosMiddleware:
    """Injects latency and synthetic errors into HTTP requests.

    Usage:
        app.add_middleware(
            ChaosMiddleware,
            policy=chaos().with_latency_range(100, 500).with_error_rate(0.05),
        )

    Websocket and lifespan traffic is passed through untouched.
    """

    def __init__(
        self,
        app: ASGIApp,
        policy: ChaosPolicy | PolicyBuilder | None = None,
        engine: ChaosEngine | None = None,
    ) -> None:
        self.app = app
        self.engine = _engine_for(policy, engine)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        decision = self.engine.decide(scope["method"], scope.get("path", "/"))

        if decision.injects_latency:
            await async_sleep_ms(decision.delay_ms)

        if decision.status is not None:
            response = Response(content=decision.body, status_code=decision.status)
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)
