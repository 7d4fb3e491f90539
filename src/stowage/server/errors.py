"""Error handling pipeline for host requests.

Router errors become plain-text responses; anything else raised while
handling a request (a faulty fallback, a faulty route handler) is logged
and answered with a generic 500.
"""

import logging

from stowage.errors import HTTPError
from stowage.http.request import Request
from stowage.http.response import Response

logger = logging.getLogger("stowage.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response carrying its status and headers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.full_path, exc.detail)
    response = Response(body=exc.detail or f"Error {exc.status}", status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request) -> Response:  # noqa: ARG001
    """Log an unexpected exception and answer 500."""
    logger.exception("500 %s %s", request.method, request.full_path)
    return Response(body="Internal Server Error", status=500)
