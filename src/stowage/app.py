"""Minimal ASGI host for embed services.

Mutable during setup (routes, mounts, middleware). Frozen at runtime
when the first request or the lifespan startup arrives.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from stowage._internal.asgi import Receive, Scope, Send
from stowage.middleware.protocol import Middleware
from stowage.routing import Mount, Route, Router, Service
from stowage.server.handler import handle_request


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Callable[..., Any]
    methods: list[str] | None


class App:
    """An ASGI application hosting routes and embed services.

    Usage::

        app = App()
        app.mount(Embed("/static", assets))

        @app.route("/health")
        def health():
            return "ok"

    Thread safety:
        Setup is single-threaded (module import time). The freeze
        transition uses a Lock + double-check so exactly one thread
        compiles the router, even when several workers receive their
        first request at once.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "_pending_mounts",
        "_pending_routes",
        "_router",
    )

    def __init__(self) -> None:
        self._pending_routes: list[_PendingRoute] = []
        self._pending_mounts: list[Mount] = []
        self._middleware_list: list[Middleware] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._middleware: tuple[Callable[..., Any], ...] = ()

    # -- Registration --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an exact-path handler (GET only unless *methods* is set)."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self._check_not_frozen()
            self._pending_routes.append(_PendingRoute(path, func, methods))
            return func

        return decorator

    def mount(self, service: Service, prefix: str | None = None) -> None:
        """Delegate every path under a prefix to *service*.

        *prefix* defaults to ``service.mount_prefix`` (as set on an
        ``Embed``). A prefix of ``""`` or ``"/"`` mounts at the root.
        """
        self._check_not_frozen()
        if prefix is None:
            prefix = getattr(service, "mount_prefix", "")
        self._pending_mounts.append(Mount(prefix=prefix.rstrip("/"), service=service))

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware to the pipeline."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        self._ensure_frozen()
        assert self._router is not None
        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            middleware=self._middleware,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Freeze on startup and acknowledge both lifespan events."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        routes = tuple(
            Route(
                path=pending.path,
                handler=pending.handler,
                methods=frozenset(m.upper() for m in (pending.methods or ["GET"])),
            )
            for pending in self._pending_routes
        )
        self._router = Router(routes, tuple(self._pending_mounts))
        self._middleware = tuple(self._middleware_list)
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, mounts and middleware before the first request."
            )
            raise RuntimeError(msg)
