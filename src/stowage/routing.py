"""Route table for the host app.

Two kinds of entries, both frozen at app startup:

- ``Route``: an exact path answered by a handler for a set of methods.
- ``Mount``: a path prefix delegated to a service (an ``Embed``). The
  service sees the request path with the prefix removed.

Matching order: exact routes first, then mounts by longest prefix. A root
mount (prefix ``""``) matches everything and is therefore always tried
last.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from stowage.errors import MethodNotAllowed, NotFound
from stowage.http.request import Request
from stowage.http.response import Response

Service: TypeAlias = Callable[[Request], Awaitable[Response]]


@dataclass(frozen=True, slots=True)
class Route:
    """An exact-path route."""

    path: str
    handler: Callable[..., Any]
    methods: frozenset[str]


@dataclass(frozen=True, slots=True)
class Mount:
    """A prefix-delegated service.

    ``prefix`` has no trailing slash; ``""`` is the root.
    """

    prefix: str
    service: Service

    @property
    def is_root(self) -> bool:
        return not self.prefix

    def matches(self, path: str) -> bool:
        if self.is_root:
            return True
        return path == self.prefix or path.startswith(self.prefix + "/")

    def remainder(self, path: str) -> str:
        """*path* with the prefix removed (starts with ``/`` or is empty)."""
        return path[len(self.prefix) :]


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful match: exactly one of route or mount is set."""

    route: Route | None = None
    mount: Mount | None = None


class Router:
    """Immutable lookup over routes and mounts."""

    __slots__ = ("_mounts", "_routes")

    def __init__(self, routes: tuple[Route, ...] = (), mounts: tuple[Mount, ...] = ()) -> None:
        by_path: dict[str, list[Route]] = {}
        for route in routes:
            by_path.setdefault(route.path, []).append(route)
        self._routes = {path: tuple(entries) for path, entries in by_path.items()}
        self._mounts = tuple(sorted(mounts, key=lambda m: len(m.prefix), reverse=True))

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the route or mount for *method* and *path*.

        Raises:
            MethodNotAllowed: An exact route exists for *path* but not for
                *method*, and no mount claims the path.
            NotFound: Nothing matches.
        """
        method = method.upper()
        allowed: set[str] = set()
        for route in self._routes.get(path, ()):
            if method in route.methods:
                return RouteMatch(route=route)
            allowed |= route.methods

        for mount in self._mounts:
            if mount.matches(path):
                return RouteMatch(mount=mount)

        if allowed:
            raise MethodNotAllowed(frozenset(allowed))
        raise NotFound()
