"""Embedded asset service.

Serves an immutable asset table under a URL prefix. Each request ends in
exactly one of:

- ``405`` for any method other than GET,
- ``304`` when ``If-None-Match`` equals the asset's ETag,
- ``200`` with the asset bytes, its content type and ETag,
- whatever the fallback answers when no asset matches.

Register it with ``App.mount()``::

    assets = EmbeddedAssets.from_directory("./dist")
    app.mount(Embed("/static", assets).with_index_file("index.html"))

A root mount (``"/"`` or ``""``) receives every path that no route or
longer mount claims.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from stowage._internal.invoke import invoke
from stowage.assets import AssetSource
from stowage.config import EmbedConfig
from stowage.fallback import FallbackHandler, FallbackResult
from stowage.http.request import Request
from stowage.http.response import Response
from stowage.mime import guess_content_type

logger = logging.getLogger("stowage.embed")


class Embed:
    """An embed service: an asset table plus an ``EmbedConfig``.

    The builder methods mirror ``EmbedConfig`` and return a new ``Embed``
    sharing the same asset table; an ``Embed`` is never modified after
    construction.

    Usage::

        embed = (
            Embed("/", assets)
            .with_index_file("index.html")
            .with_fallback(lambda request: Response("not found", status=200))
        )
    """

    __slots__ = ("_assets", "_config")

    def __init__(
        self,
        mount_prefix: str,
        assets: AssetSource,
        *,
        config: EmbedConfig | None = None,
    ) -> None:
        self._assets = assets
        self._config = config if config is not None else EmbedConfig.create(mount_prefix)

    def __repr__(self) -> str:
        return f"Embed(mount_prefix={self._config.mount_prefix!r})"

    # -- Builder --

    def with_strict_slash(self, strict_slash: bool) -> Embed:
        """Return a copy that does (or does not) ignore a trailing slash."""
        return self._with_config(self._config.with_strict_slash(strict_slash))

    def with_index_file(self, path: str) -> Embed:
        """Return a copy serving *path* for requests to the mount root."""
        return self._with_config(self._config.with_index_file(path))

    def with_fallback(
        self,
        handler: FallbackHandler | Callable[[Request], FallbackResult],
    ) -> Embed:
        """Return a copy that calls *handler* when no asset matches."""
        return self._with_config(self._config.with_fallback(handler))

    def _with_config(self, config: EmbedConfig) -> Embed:
        return Embed(config.mount_prefix, self._assets, config=config)

    # -- Properties --

    @property
    def config(self) -> EmbedConfig:
        return self._config

    @property
    def assets(self) -> AssetSource:
        return self._assets

    @property
    def mount_prefix(self) -> str:
        return self._config.mount_prefix

    # -- Request handling --

    def split_request(self, request: Request) -> tuple[str, Request]:
        """Return the path relative to the mount and the client's request.

        A host router that already stripped the prefix moved it onto
        ``root_path``; the client's request is rebuilt from that. A request
        whose path still starts with the prefix (a direct call, or a host
        that does not strip) has the prefix removed here. Anything else is
        taken as already relative.
        """
        prefix = self._config.mount_prefix
        if not prefix:
            return request.path, request
        if request.root_path.endswith(prefix):
            outer_root = request.root_path[: -len(prefix)]
            return request.path, request.with_path(prefix + request.path, root_path=outer_root)
        if request.path == prefix or request.path.startswith(prefix + "/"):
            return request.path[len(prefix) :], request
        return request.path, request

    def resolve_path(self, path: str) -> str:
        """Turn a mount-relative request path into the asset key to look up."""
        if path.startswith("/"):
            path = path[1:]
        if not self._config.strict_slash and path.endswith("/"):
            path = path[:-1]
        if not path and self._config.index_file is not None:
            path = self._config.index_file
        return path

    async def __call__(self, request: Request) -> Response:
        """Answer one request. Fallback faults propagate to the host."""
        if request.method.upper() != "GET":
            return Response(status=405, content_type=None).with_header("Allow", "GET")

        relative, client_request = self.split_request(request)
        path = self.resolve_path(relative)
        asset = self._assets.get(path)

        if asset is None:
            logger.debug("No asset for %r, calling %r", path, self._config.fallback)
            response = await invoke(self._config.fallback.execute, client_request)
            if not isinstance(response, Response):
                msg = (
                    f"Fallback {self._config.fallback!r} returned "
                    f"{type(response).__name__}, expected Response."
                )
                raise TypeError(msg)
            return response

        if request.if_none_match == asset.etag:
            return Response(status=304, content_type=None)

        return Response(
            body=asset.data,
            content_type=guess_content_type(path),
        ).with_header("ETag", asset.etag)
