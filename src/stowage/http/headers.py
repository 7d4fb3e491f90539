"""Immutable, case-insensitive request headers.

Keeps the raw ASGI byte pairs and decodes names and values as latin-1,
which never fails, so a header with odd bytes is still readable (and will
simply not match anything it is compared to).
"""

from collections.abc import Iterator, Mapping


class Headers(Mapping[str, str]):
    """Read-only header mapping with case-insensitive keys.

    ``headers[name]`` returns the first value sent for *name*;
    ``get_list`` returns every value in arrival order.
    """

    __slots__ = ("_index", "_raw")

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        index: dict[str, list[str]] = {}
        for name, value in raw:
            key = name.decode("latin-1").lower()
            index.setdefault(key, []).append(value.decode("latin-1"))
        self._raw = raw
        self._index = index

    @classmethod
    def from_pairs(cls, pairs: Mapping[str, str] | tuple[tuple[str, str], ...]) -> "Headers":
        """Build headers from ``str`` pairs (or a ``dict``)."""
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        return cls(tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in items))

    def __getitem__(self, key: str) -> str:
        values = self._index.get(key.lower())
        if not values:
            raise KeyError(key)
        return values[0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Headers({dict((k, v[0]) for k, v in self._index.items())!r})"

    def get_list(self, key: str) -> list[str]:
        """Every value sent for *key*, empty if the header is absent."""
        return list(self._index.get(key.lower(), ()))

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """The raw ASGI header pairs, untouched."""
        return self._raw
