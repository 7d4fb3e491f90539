"""Content-type resolution by file extension.

Uses a private ``mimetypes.MimeTypes`` table built from Python's built-in
defaults only, so the answer does not depend on the ``mime.types`` files
of the machine serving the request.

Compressed files (``.gz``, ``.svgz``, ``.tgz``, ...) are served as the
compression format: the bytes go out as stored, without a
``Content-Encoding`` header, so labelling them with the inner type would
make clients misread them.
"""

import mimetypes

DEFAULT_CONTENT_TYPE = "application/octet-stream"

ENCODING_CONTENT_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "compress": "application/x-compress",
}

_types = mimetypes.MimeTypes()


def guess_content_type(path: str) -> str:
    """Best-effort content type for *path*; octet-stream when unknown."""
    content_type, encoding = _types.guess_type(path, strict=False)
    if encoding is not None:
        return ENCODING_CONTENT_TYPES.get(encoding, DEFAULT_CONTENT_TYPE)
    return content_type or DEFAULT_CONTENT_TYPE
