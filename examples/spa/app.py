"""Single-page app: a built frontend served from memory.

Demonstrates:
- Loading a build directory into an immutable asset table at startup
- A root-level Embed with ``index.html`` as the index file
- A fallback that answers unknown paths with the app shell, so
  client-side routes (``/settings``, ``/users/42``) survive a reload
- An API route living next to the root mount

Run with any ASGI server:
    uvicorn app:app
"""

from pathlib import Path

from stowage import App, Embed, EmbeddedAssets, Request, Response

PUBLIC_DIR = Path(__file__).parent / "public"

assets = EmbeddedAssets.from_directory(PUBLIC_DIR)
shell = assets["index.html"]


def app_shell(request: Request) -> Response:
    """Serve index.html for paths that look like client routes."""
    last_segment = request.path.rsplit("/", 1)[-1]
    if "." in last_segment:
        # Looks like a file (e.g. /assets/missing.js): a real 404.
        return Response(body="404 Not Found", status=404)
    return Response(body=shell.data, content_type="text/html; charset=utf-8")


app = App()


@app.route("/api/health")
def health():
    return Response(body='{"status": "ok"}', content_type="application/json")


app.mount(Embed("/", assets).with_index_file("index.html").with_fallback(app_shell))
