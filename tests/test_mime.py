"""Tests for content-type resolution."""

import pytest

from stowage.assets import EmbeddedAssets
from stowage.embed import Embed
from stowage.http.request import Request
from stowage.mime import DEFAULT_CONTENT_TYPE, guess_content_type


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("index.html", "text/html"),
        ("assets/index.css", "text/css"),
        ("img/logo.png", "image/png"),
        ("data.json", "application/json"),
    ],
)
def test_known_extensions(path, expected) -> None:
    assert guess_content_type(path) == expected


def test_javascript() -> None:
    assert guess_content_type("app.js") in ("text/javascript", "application/javascript")


@pytest.mark.parametrize("path", ["LICENSE", "data/blob", "archive.unknownext", ""])
def test_unknown_falls_back_to_octet_stream(path) -> None:
    assert guess_content_type(path) == DEFAULT_CONTENT_TYPE == "application/octet-stream"


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("x.gz", "application/gzip"),
        ("dist/a.tar.gz", "application/gzip"),
        ("bundle.tgz", "application/gzip"),
        ("img/icon.svgz", "application/gzip"),
        ("logs.bz2", "application/x-bzip2"),
        ("dump.xz", "application/x-xz"),
    ],
)
def test_compressed_files_keep_compression_type(path, expected) -> None:
    assert guess_content_type(path) == expected


async def test_svgz_asset_not_served_as_svg() -> None:
    embed = Embed("/", EmbeddedAssets({"icon.svgz": b"\x1f\x8b\x08\x00"}))
    response = await embed(Request(method="GET", path="/icon.svgz"))
    assert response.status == 200
    assert response.content_type == "application/gzip"
