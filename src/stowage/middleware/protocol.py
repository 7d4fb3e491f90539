"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(request: Request, next: Next) -> Response: ...

No base class required. Middleware wraps routes and mounts alike, so it
also sees every response an embed service produces::

    async def cache_forever(request: Request, next: Next) -> Response:
        response = await next(request)
        if response.header("etag") is not None:
            return response.with_header("Cache-Control", "public, max-age=31536000")
        return response
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from stowage.http.request import Request
from stowage.http.response import Response

# The next handler in the middleware chain
Next: TypeAlias = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """Protocol for stowage middleware (functions or callable objects)."""

    async def __call__(self, request: Request, next: Next) -> Response: ...
