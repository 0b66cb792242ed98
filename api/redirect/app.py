"""FastAPI application for the redirect service.

Run:
    uv run uvicorn api.redirect.app:app --reload --port 8000
"""

from fastapi import FastAPI, Request, Response

from api.redirect.log_config import setup_logging
from lib.redirect.models import RedirectRequest
from services.redirect import handle_request

setup_logging()

app = FastAPI(title="YouTube Deep-Link Redirector")


@app.get("/health")
async def health():
    return {"status": "ok"}


def _raw_path(request: Request) -> str:
    """Path as sent, still percent-encoded (url.path is decoded)."""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.split(b"?", 1)[0].decode("latin-1")


# Catch-all. MUST be registered last so it doesn't shadow /health.
@app.api_route("/{path:path}", methods=["GET", "HEAD"])
async def redirect(path: str, request: Request):
    redirect_request = RedirectRequest(
        path=_raw_path(request),
        query_string=request.url.query,
        headers=dict(request.headers),
    )
    result = handle_request(redirect_request)
    return Response(
        content=result.body or b"",
        status_code=result.status_code,
        headers=result.headers,
    )
