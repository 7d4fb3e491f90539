"""Fallback handlers: what the embed service answers when no asset matches.

A fallback is anything with an ``execute(request)`` method returning a
``Response`` (or an awaitable resolving to one). Plain callables are
wrapped in ``CustomFallback`` by the builder, so both of these work::

    embed.with_fallback(lambda request: Response("not found", status=200))

    async def spa_shell(request: Request) -> Response:
        ...

    embed.with_fallback(spa_shell)

Fallbacks are called concurrently from every in-flight request. The
built-in ones hold no mutable state; a custom one that keeps state must
guard it itself.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

from stowage.errors import ConfigurationError
from stowage.http.request import Request
from stowage.http.response import Response

FallbackResult: TypeAlias = Response | Awaitable[Response]


@runtime_checkable
class FallbackHandler(Protocol):
    """Protocol for fallback handlers."""

    def execute(self, request: Request) -> FallbackResult: ...


@dataclass(frozen=True, slots=True)
class DefaultFallback:
    """Answers ``404 Not Found`` regardless of the request."""

    def execute(self, request: Request) -> Response:  # noqa: ARG002
        return Response(body="404 Not Found", status=404)


@dataclass(frozen=True, slots=True)
class CustomFallback:
    """Wraps a caller-supplied ``(request) -> Response`` function.

    The function's response is returned verbatim, including 2xx answers
    that hide the miss from the client.
    """

    func: Callable[[Request], FallbackResult]

    def execute(self, request: Request) -> FallbackResult:
        return self.func(request)


def as_fallback(handler: FallbackHandler | Callable[[Request], FallbackResult]) -> FallbackHandler:
    """Coerce *handler* into a ``FallbackHandler``.

    Raises:
        ConfigurationError: If *handler* is a class, or is neither a
            fallback handler nor callable.
    """
    if isinstance(handler, type):
        msg = f"Fallback must be an instance, got the class {handler.__name__}; call it first."
        raise ConfigurationError(msg)
    if isinstance(handler, FallbackHandler):
        return handler
    if callable(handler):
        return CustomFallback(handler)
    msg = f"Fallback must be callable or define execute(request), got {type(handler).__name__}."
    raise ConfigurationError(msg)
