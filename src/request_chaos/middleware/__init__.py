"""Host framework integrations."""

from request_chaos.middleware.asgi import ChaosMiddleware
from request_chaos.middleware.wsgi import WSGIChaosMiddleware

__all__ = ["ChaosMiddleware", "WSGIChaosMiddleware"]
