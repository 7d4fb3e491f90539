"""ASGI handler: translates ASGI scope/messages to stowage types.

The only component that touches raw ASGI directly. Converts the scope to
a Request, dispatches through middleware and the router, and sends the
Response back through ASGI ``send()``.
"""

import inspect
from collections.abc import Callable
from typing import Any

from stowage._internal.asgi import Receive, Scope, Send
from stowage._internal.invoke import invoke
from stowage.errors import HTTPError
from stowage.http.request import Request
from stowage.http.response import Response
from stowage.middleware.protocol import Next
from stowage.routing import Router
from stowage.server.errors import handle_http_error, handle_internal_error
from stowage.server.negotiation import negotiate
from stowage.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001
    send: Send,
    *,
    router: Router,
    middleware: tuple[Callable[..., Any], ...],
) -> None:
    """Process a single HTTP request through the full pipeline."""
    request = Request.from_asgi(dict(scope))

    async def dispatch(req: Request) -> Response:
        match = router.match(req.method, req.path)
        if match.mount is not None:
            mount = match.mount
            inner = req.with_path(
                mount.remainder(req.path),
                root_path=req.root_path + mount.prefix,
            )
            return await mount.service(inner)
        assert match.route is not None
        route_handler = match.route.handler
        args = (req,) if inspect.signature(route_handler).parameters else ()
        return negotiate(await invoke(route_handler, *args))

    handler: Next = dispatch
    for mw in reversed(middleware):

        async def make_next(req: Request, _mw: Any = mw, _next: Next = handler) -> Response:
            return await _mw(req, _next)

        handler = make_next

    try:
        response = await handler(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send)
