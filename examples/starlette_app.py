"""Minimal Starlette app running behind request-chaos.

Run with:
    CHAOS_LATENCY=100-800 CHAOS_ERROR_RATE=0.1 uvicorn examples.starlette_app:app
"""

import contextlib
from typing import AsyncIterator

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from request_chaos import ChaosMiddleware, policy_from_env
from request_chaos.core import ChaosEngine, Recorder
from request_chaos.events import JsonlSink


async def orders(request: Request) -> JSONResponse:
    return JSONResponse([{"id": 1, "status": "shipped"}])


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"ok": True})


engine = ChaosEngine(
    policy_from_env().model_copy(update={"exclude_paths": ("/health",)}),
    recorder=Recorder(JsonlSink(".request_chaos/events.jsonl")),
)


@contextlib.asynccontextmanager
async def lifespan(app: Starlette) -> AsyncIterator[None]:
    try:
        yield
    finally:
        engine.recorder.close()


app = Starlette(
    routes=[Route("/orders", orders), Route("/health", health)],
    lifespan=lifespan,
)
app.add_middleware(ChaosMiddleware, engine=engine)
