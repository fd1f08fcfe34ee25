"""FastAPI application - JSON API plus the static single-page client."""

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from loguru import logger

from app.container import Container
from wca_client import UpstreamError
from web.api.errors import ErrorResponse, error_response
from web.api.records import get_health, get_swiss_prs
from web.api.records.schemas import HealthResponse, SwissPrsResponse

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _static_file(path: str) -> Path:
    """File under STATIC_DIR for path, falling back to index.html."""
    candidate = (STATIC_DIR / path).resolve()
    if path and candidate.is_file() and candidate.is_relative_to(STATIC_DIR):
        return candidate
    return STATIC_DIR / "index.html"


def create_app(container: Container | None = None) -> FastAPI:
    """Build the app around an initialized container."""
    container = container or Container().init()

    app = FastAPI(
        title="Swiss PRs",
        description="Recent personal records of Swiss competitors, grouped by date",
        version="1.0.0",
    )
    app.state.container = container

    @app.exception_handler(UpstreamError)
    @app.exception_handler(Exception)
    async def error_handler(request: Request, exc: Exception):
        status, body = error_response(exc)
        if status == 502:
            logger.warning("Upstream unavailable on {}: {}", request.url.path, body.details)
        else:
            logger.opt(exception=exc).error("Unhandled exception on {}", request.url.path)
        return JSONResponse(status_code=status, content=body.model_dump())

    @app.get(
        "/api/swiss-prs",
        response_model=SwissPrsResponse,
        responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    )
    async def swiss_prs(request: Request):
        return await get_swiss_prs(request.app.state.container.records)

    @app.get("/api/health", response_model=HealthResponse)
    def health(request: Request):
        return get_health(request.app.state.container.records)

    @app.get("/api/{rest:path}", include_in_schema=False)
    def api_not_found(rest: str):
        return JSONResponse(status_code=404, content={"error": "Not found", "details": f"/api/{rest}"})

    @app.get("/{path:path}", include_in_schema=False)
    def spa(path: str):
        return FileResponse(_static_file(path))

    return app
