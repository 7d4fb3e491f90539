"""ASGI response sending: translates a Response into ASGI messages.

Fallback responses reach the wire verbatim, so the sender owns
``content-length``: any value a fallback set is replaced by the length
of the body actually sent.
"""

from stowage._internal.asgi import Send
from stowage.http.response import Response


def body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC 9110: 1xx, 204 and 304 responses never include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def encode_headers(response: Response, body: bytes) -> list[tuple[bytes, bytes]]:
    """Lowercased latin-1 header pairs for *response* carrying *body*."""
    raw: list[tuple[bytes, bytes]] = []
    if response.content_type is not None:
        raw.append((b"content-type", response.content_type.encode("latin-1")))
    for name, value in response.headers:
        lowered = name.lower()
        if lowered == "content-length":
            continue
        raw.append((lowered.encode("latin-1"), value.encode("latin-1")))
    raw.append((b"content-length", str(len(body)).encode("latin-1")))
    return raw


async def send_response(response: Response, send: Send) -> None:
    """Send *response* as one ``http.response.start`` and one body message."""
    body = response.body_bytes if body_allowed(response.status) else b""
    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": encode_headers(response, body),
        }
    )
    await send({"type": "http.response.body", "body": body})
