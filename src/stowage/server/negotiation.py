"""Turn route handler return values into Responses.

Handlers may return:

- ``Response``: passed through,
- ``str`` or ``bytes``: body of a 200,
- ``(body, status)``: body with a status code.
"""

from typing import Any

from stowage.http.response import Response


def negotiate(result: Any) -> Response:
    """Convert a handler return value into a Response."""
    match result:
        case Response():
            return result
        case str() | bytes():
            return Response(body=result)
        case (str() | bytes() as body, int() as status):
            return Response(body=body, status=status)
        case _:
            msg = f"Cannot convert {type(result).__name__} to a response."
            raise TypeError(msg)
