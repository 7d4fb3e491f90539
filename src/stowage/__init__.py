"""Stowage: serve embedded assets from an ASGI app.

An immutable, in-memory asset table served under a URL prefix with
ETag / If-None-Match validation and a pluggable fallback for misses.

Basic usage::

    from stowage import App, Embed, EmbeddedAssets

    assets = EmbeddedAssets.from_directory("./dist")

    app = App()
    app.mount(Embed("/", assets).with_index_file("index.html"))
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "Asset",
    "AssetSource",
    "ConfigurationError",
    "CustomFallback",
    "DefaultFallback",
    "Embed",
    "EmbedConfig",
    "EmbeddedAssets",
    "FallbackHandler",
    "HTTPError",
    "MethodNotAllowed",
    "Middleware",
    "Next",
    "NotFound",
    "Request",
    "Response",
    "StowageError",
    "guess_content_type",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API."""
    if name == "App":
        from stowage.app import App

        return App

    if name == "Embed":
        from stowage.embed import Embed

        return Embed

    if name == "EmbedConfig":
        from stowage.config import EmbedConfig

        return EmbedConfig

    if name in ("Asset", "AssetSource", "EmbeddedAssets"):
        from stowage import assets as _assets

        return getattr(_assets, name)

    if name in ("CustomFallback", "DefaultFallback", "FallbackHandler"):
        from stowage import fallback as _fallback

        return getattr(_fallback, name)

    if name == "Request":
        from stowage.http.request import Request

        return Request

    if name == "Response":
        from stowage.http.response import Response

        return Response

    if name in ("Middleware", "Next"):
        from stowage.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "guess_content_type":
        from stowage.mime import guess_content_type

        return guess_content_type

    if name in ("ConfigurationError", "HTTPError", "MethodNotAllowed", "NotFound", "StowageError"):
        from stowage import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
