"""Async test client for stowage applications.

Drives the ASGI app in-process and returns the same ``Response`` type
the app produces. No network involved.
"""

from __future__ import annotations

from typing import Any

from stowage._internal.asgi import ASGIApp
from stowage.http.response import Response


class TestClient:
    """Async test client.

    Usage::

        async with TestClient(app) as client:
            response = await client.get("/index.html")
            assert response.status == 200
            etag = response.header("etag")
    """

    __test__ = False  # Tell pytest this is not a test class
    __slots__ = ("app",)

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __aenter__(self) -> TestClient:
        await self._lifespan("startup")
        return self

    async def __aexit__(self, *args: object) -> None:
        await self._lifespan("shutdown")

    async def _lifespan(self, phase: str) -> None:
        sent = False
        replies: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            nonlocal sent
            if not sent:
                sent = True
                return {"type": f"lifespan.{phase}"}
            # The app answered and is waiting for the next event.
            return {"type": "lifespan.shutdown"}

        async def send(message: dict[str, Any]) -> None:
            replies.append(message)

        await self.app({"type": "lifespan", "asgi": {"version": "3.0"}}, receive, send)
        if replies and replies[0]["type"].endswith(".failed"):
            raise RuntimeError(replies[0].get("message", f"lifespan {phase} failed"))

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def head(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a HEAD request."""
        return await self.request("HEAD", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send a POST request."""
        return await self.request("POST", path, headers=headers, body=body)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send an arbitrary request through the ASGI app."""
        path_part, _, query_string = path.partition("?")

        raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ]

        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method,
            "path": path_part,
            "raw_path": path_part.encode("latin-1"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        request_body = body or b""
        body_sent = False

        async def receive() -> dict[str, Any]:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": request_body, "more_body": False}
            return {"type": "http.disconnect"}

        status = 200
        response_headers: list[tuple[bytes, bytes]] = []
        body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            nonlocal status, response_headers
            if message["type"] == "http.response.start":
                status = message["status"]
                response_headers = list(message.get("headers", []))
            elif message["type"] == "http.response.body":
                body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)

        content_type: str | None = None
        extra_headers: list[tuple[str, str]] = []
        for name_b, value_b in response_headers:
            name = name_b.decode("latin-1")
            value = value_b.decode("latin-1")
            if name == "content-type":
                content_type = value
            elif name != "content-length":
                extra_headers.append((name, value))

        return Response(
            body=b"".join(body_parts),
            status=status,
            content_type=content_type,
            headers=tuple(extra_headers),
        )
