"""Embed service configuration.

EmbedConfig is a frozen dataclass: every ``with_*()`` call returns a new
instance, so a config can be shared between services and threads without
anyone observing a change.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace

from stowage.fallback import DefaultFallback, FallbackHandler, FallbackResult, as_fallback
from stowage.http.request import Request


@dataclass(frozen=True, slots=True)
class EmbedConfig:
    """Serving policy for one embed service. Immutable after creation.

    Build through ``create()`` and the ``with_*()`` methods so values are
    normalized::

        config = (
            EmbedConfig.create("/static/")
            .with_index_file("/index.html")
            .with_strict_slash(True)
        )
        config.mount_prefix  # "/static"
        config.index_file    # "index.html"
    """

    mount_prefix: str = ""
    strict_slash: bool = False
    index_file: str | None = None
    fallback: FallbackHandler = field(default_factory=DefaultFallback)

    @classmethod
    def create(cls, mount_prefix: str) -> EmbedConfig:
        """New config mounted at *mount_prefix* (trailing slashes trimmed).

        Any string is accepted; ``""`` and ``"/"`` both mean the
        application root.
        """
        return cls(mount_prefix=mount_prefix.rstrip("/"))

    def with_strict_slash(self, strict_slash: bool) -> EmbedConfig:
        """Whether ``/dir/file/`` is distinct from ``/dir/file``.

        Off by default: a single trailing slash is ignored before lookup.
        """
        return replace(self, strict_slash=strict_slash)

    def with_index_file(self, path: str) -> EmbedConfig:
        """Asset served when the request targets the mount root."""
        return replace(self, index_file=path.strip("/"))

    def with_fallback(
        self,
        handler: FallbackHandler | Callable[[Request], FallbackResult],
    ) -> EmbedConfig:
        """Replace the handler used when no asset matches.

        Only one fallback is active; the last call wins.
        """
        return replace(self, fallback=as_fallback(handler))

    @property
    def is_root(self) -> bool:
        """True when mounted at the application root."""
        return not self.mount_prefix
