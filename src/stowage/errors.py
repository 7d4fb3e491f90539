"""Stowage exception hierarchy.

Shared across the builder, the embed handler, the router and the ASGI
host so every module raises and catches the same types.
"""

from dataclasses import dataclass


class StowageError(Exception):
    """Base for all stowage-specific errors."""


class ConfigurationError(StowageError):
    """Raised when a service or asset table is built from invalid input.

    Always raised at build time, never while serving a request.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(StowageError):
    """An error that maps directly to an HTTP status code.

    Raised by the router. The ASGI handler catches these and turns them
    into plain-text responses.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818: conventional name in web frameworks
    """404: no route or mount matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818: conventional name in web frameworks
    """405: route exists but not for this HTTP method.

    Carries an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        super().__init__(
            status=405,
            detail=detail or f"Method not allowed. Allowed methods: {allow_value}",
            headers=(("Allow", allow_value),),
        )
