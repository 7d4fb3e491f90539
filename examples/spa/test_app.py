"""Tests for the single-page app example."""

from stowage.testing import TestClient


class TestSpaExample:
    async def test_root_serves_shell(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/")
        assert response.status == 200
        assert b'<main id="app">' in response.body
        assert response.header("etag") is not None

    async def test_client_route_gets_shell(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/users/42")
        assert response.status == 200
        assert b'<main id="app">' in response.body
        assert response.header("etag") is None

    async def test_missing_file_is_404(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/assets/missing.js")
        assert response.status == 404

    async def test_revalidation(self, example_app) -> None:
        async with TestClient(example_app) as client:
            first = await client.get("/assets/app.css")
            second = await client.get(
                "/assets/app.css", headers={"If-None-Match": first.header("etag")}
            )
        assert first.status == 200
        assert first.content_type == "text/css"
        assert second.status == 304

    async def test_api_route(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/api/health")
        assert response.text == '{"status": "ok"}'
