"""Immutable in-memory asset tables.

An asset table maps relative, slash-separated keys (``"index.html"``,
``"assets/index.css"``) to ``Asset`` records. Every record carries its
SHA-256 digest and the hex ETag derived from it, both computed once when
the table is built, so serving never hashes anything.

Tables are built at startup from a mapping, a directory, or package data
and are never modified afterwards::

    assets = EmbeddedAssets.from_directory("./dist")
    assets = EmbeddedAssets.from_package("myapp", "static")
    assets = EmbeddedAssets({"index.html": b"<h1>Hi</h1>"})

Anything with a ``get(path) -> Asset | None`` method can stand in for a
table (see ``AssetSource``).
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from stowage.errors import ConfigurationError

logger = logging.getLogger("stowage.assets")


@dataclass(frozen=True, slots=True)
class Asset:
    """One servable file: its key, its bytes and their digest."""

    path: str
    data: bytes
    digest: bytes
    etag: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "etag", self.digest.hex())

    @classmethod
    def from_bytes(cls, path: str, data: bytes) -> Asset:
        """Build an asset, hashing *data* with SHA-256."""
        data = bytes(data)
        return cls(path=path, data=data, digest=hashlib.sha256(data).digest())

    def __repr__(self) -> str:
        return f"Asset(path={self.path!r}, size={len(self.data)}, etag={self.etag[:12]}...)"


@runtime_checkable
class AssetSource(Protocol):
    """Lookup-by-key interface the embed handler consumes.

    Lookups are exact string matches: no prefix matching, no case folding.
    """

    def get(self, path: str) -> Asset | None: ...


def _check_key(key: str) -> str:
    if not key:
        raise ConfigurationError("Asset keys must not be empty.")
    if key.startswith("/") or key.endswith("/"):
        raise ConfigurationError(
            f"Asset key {key!r} must be relative and must not end with a slash."
        )
    if any(part in ("", ".", "..") for part in key.split("/")):
        raise ConfigurationError(f"Asset key {key!r} contains an empty, '.' or '..' segment.")
    return key


class EmbeddedAssets(Mapping[str, Asset]):
    """Read-only ``key -> Asset`` table.

    Implements ``Mapping[str, Asset]`` and the ``AssetSource`` protocol.
    Safe to share between any number of concurrent requests: nothing
    writes to it after ``__init__`` returns.
    """

    __slots__ = ("_assets",)

    def __init__(self, files: Mapping[str, bytes] | None = None) -> None:
        built = {
            _check_key(key): Asset.from_bytes(key, data)
            for key, data in (files or {}).items()
        }
        self._assets: Mapping[str, Asset] = MappingProxyType(built)
        logger.debug("Embedded %d assets", len(built))

    @classmethod
    def from_directory(cls, directory: str | Path) -> EmbeddedAssets:
        """Read every regular file below *directory* into a new table.

        Keys are POSIX-style paths relative to *directory*. Symlinks are
        followed as ordinary files.
        """
        root = Path(directory)
        if not root.is_dir():
            raise ConfigurationError(f"Asset directory {str(root)!r} does not exist.")
        files = {
            path.relative_to(root).as_posix(): path.read_bytes()
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }
        return cls(files)

    @classmethod
    def from_package(cls, package: str, subdirectory: str = "") -> EmbeddedAssets:
        """Read package data (via ``importlib.resources``) into a new table.

        ``subdirectory`` is a slash-separated path inside *package*; keys
        are relative to it.
        """
        root: Traversable = resources.files(package)
        for part in subdirectory.strip("/").split("/"):
            if part:
                root = root.joinpath(part)
        if not root.is_dir():
            raise ConfigurationError(
                f"Package {package!r} has no resource directory {subdirectory!r}."
            )
        files: dict[str, bytes] = {}
        _collect(root, "", files)
        return cls(files)

    def __getitem__(self, key: str) -> Asset:
        return self._assets[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._assets)

    def __len__(self) -> int:
        return len(self._assets)

    def __repr__(self) -> str:
        return f"EmbeddedAssets({len(self._assets)} assets)"

    def get(self, path: str, default: Asset | None = None) -> Asset | None:  # type: ignore[override]
        """Return the asset stored under *path* exactly, or *default*."""
        return self._assets.get(path, default)


def _collect(node: Traversable, prefix: str, into: dict[str, bytes]) -> None:
    for child in sorted(node.iterdir(), key=lambda item: item.name):
        key = f"{prefix}{child.name}"
        if child.is_dir():
            _collect(child, f"{key}/", into)
        elif child.is_file():
            into[key] = child.read_bytes()
