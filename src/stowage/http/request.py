"""Immutable HTTP request.

Only metadata: the embed handler serves GET and never reads a body.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from stowage.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is relative to ``root_path``: when the router hands a request
    to a mounted service it strips the mount prefix from ``path`` and
    appends it to ``root_path``.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query_string: bytes = b""
    root_path: str = ""
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    @property
    def if_none_match(self) -> str | None:
        """The raw ``If-None-Match`` header value, if sent."""
        return self.headers.get("if-none-match")

    @property
    def full_path(self) -> str:
        """``root_path`` + ``path``: the path the client actually requested."""
        return self.root_path + self.path

    def with_path(self, path: str, *, root_path: str | None = None) -> Request:
        """Return a copy of this request with a different path."""
        if root_path is None:
            return replace(self, path=path)
        return replace(self, path=path, root_path=root_path)

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(tuple(pair) for pair in scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            root_path=scope.get("root_path", ""),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )
