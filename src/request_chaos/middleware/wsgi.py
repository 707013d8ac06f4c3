"""WSGI middleware (Flask, Django and any other WSGI host)."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, Iterable

from request_chaos.chaos.builder import PolicyBuilder
from request_chaos.chaos.policy import ChaosPolicy
from request_chaos.core.delay import sleep_ms
from request_chaos.core.engine import ChaosEngine
from request_chaos.middleware.asgi import _engine_for

if TYPE_CHECKING:
    from _typeshed.wsgi import StartResponse, WSGIApplication, WSGIEnvironment


def _status_line(status: int) -> str:
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return f"{status} Error"


class WSGIChaosMiddleware:
    """Injects latency and synthetic errors into a WSGI application.

    Usage:
        app.wsgi_app = WSGIChaosMiddleware(app.wsgi_app, policy=policy_from_env())
    """

    def __init__(
        self,
        app: WSGIApplication,
        policy: ChaosPolicy | PolicyBuilder | None = None,
        engine: ChaosEngine | None = None,
    ) -> None:
        self.app = app
        self.engine = _engine_for(policy, engine)

    def __call__(
        self, environ: WSGIEnvironment, start_response: StartResponse
    ) -> Iterable[bytes]:
        method = environ.get("REQUEST_METHOD", "GET")
        path = environ.get("PATH_INFO", "") or "/"
        decision = self.engine.decide(method, path)

        if decision.injects_latency:
            sleep_ms(decision.delay_ms)

        if decision.status is not None:
            body = decision.body.encode("utf-8")
            start_response(
                _status_line(decision.status),
                [
                    ("Content-Type", "text/plain; charset=utf-8"),
                    ("Content-Length", str(len(body))),
                ],
            )
            return [body]

        return self.app(environ, start_response)
