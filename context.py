from contextvars import ContextVar
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

request_context: ContextVar[Optional[Request]] = ContextVar("request_context", default=None)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Expose the current request to code that has no access to it (logging, resolvers)"""

    async def dispatch(self, request: Request, call_next):
        token = request_context.set(request)
        try:
            return await call_next(request)
        finally:
            request_context.reset(token)
