"""Tests for the built-in fallback handlers."""

import pytest

from stowage.errors import ConfigurationError
from stowage.fallback import CustomFallback, DefaultFallback, FallbackHandler, as_fallback
from stowage.http.request import Request
from stowage.http.response import Response


def _req(path: str = "/missing") -> Request:
    return Request(method="GET", path=path)


class TestDefaultFallback:
    def test_always_404(self) -> None:
        fallback = DefaultFallback()
        for path in ("/", "/missing", "/a/b/c.js"):
            response = fallback.execute(_req(path))
            assert response.status == 404
            assert response.text == "404 Not Found"
            assert response.content_type == "text/plain; charset=utf-8"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(DefaultFallback(), FallbackHandler)


class TestCustomFallback:
    def test_passes_request_through(self) -> None:
        fallback = CustomFallback(lambda request: Response(request.path, status=200))
        response = fallback.execute(_req("/spa/route"))
        assert response.status == 200
        assert response.text == "/spa/route"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(CustomFallback(lambda _: Response()), FallbackHandler)


class TestAsFallback:
    def test_object_with_execute_is_kept(self) -> None:
        class Redirecting:
            def execute(self, request: Request) -> Response:
                return Response(status=302).with_header("Location", "/")

        handler = Redirecting()
        assert as_fallback(handler) is handler

    def test_plain_function_is_wrapped(self) -> None:
        def handler(request: Request) -> Response:
            return Response("x")

        wrapped = as_fallback(handler)
        assert isinstance(wrapped, CustomFallback)
        assert wrapped.func is handler

    @pytest.mark.parametrize("cls", [DefaultFallback, CustomFallback])
    def test_uninstantiated_class_rejected(self, cls) -> None:
        with pytest.raises(ConfigurationError, match=f"got the class {cls.__name__}"):
            as_fallback(cls)
