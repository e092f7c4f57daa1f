"""
uiforge - HTTP Entry Point
Generation, version history and code rendering endpoints
"""

from datetime import datetime, timezone
from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure

from .core import (
    GenerateRequest,
    Settings,
    check_tree,
    configure_logging,
    create_container,
    get_logger,
    get_settings,
)
from .agents.models import UINode
from .codegen import serialize
from .handlers import GenerateHandler, VersionStore
from .monitoring import metrics_collector


logger = get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _dump(model: Any) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with its own version history."""
    settings = settings or get_settings()
    container = create_container(settings)
    handler = container.get(GenerateHandler)
    store = container.get(VersionStore)

    app = FastAPI(title="uiforge", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.handler = handler
    app.state.store = store

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.post("/generate")
    async def generate(request: Request) -> Response:
        try:
            body = await request.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            return _error(400, "userText is required")

        try:
            validated = GenerateRequest.model_validate(body)
        except PydanticValidationError:
            return _error(400, "userText is required")

        try:
            version = handler.generate(validated.user_text)
        except Exception as e:
            # Any pipeline failure discards the request; nothing was recorded
            logger.error("generate_failed", error=str(e))
            return _error(500, str(e) or "Failed to generate UI")

        return JSONResponse(content=_dump(version))

    # History is served at the root and under /generate for older web clients
    @app.get("/versions")
    @app.get("/generate/versions")
    def list_versions() -> list[dict[str, Any]]:
        return [_dump(v) for v in store.all()]

    @app.get("/versions/{version_id}")
    @app.get("/generate/versions/{version_id}")
    def get_version(version_id: int) -> Response:
        version = store.get(version_id)
        if version is None:
            return _error(404, "Version not found")
        return JSONResponse(content=_dump(version))

    @app.get("/versions/{version_id}/code")
    @app.get("/generate/versions/{version_id}/code")
    def get_version_code(version_id: int) -> Response:
        version = store.get(version_id)
        if version is None:
            return _error(404, "Version not found")
        return JSONResponse(content={"id": version.id, "code": serialize(version.tree)})

    @app.post("/code")
    def render_code(payload: dict[str, Any] = Body(...)) -> Response:
        tree = payload.get("tree")
        if tree is None:
            return JSONResponse(content={"code": serialize(None)})

        result = check_tree(tree)
        if isinstance(result, Failure):
            return _error(400, result.failure().message)
        try:
            node = UINode.model_validate(tree)
        except PydanticValidationError as e:
            return _error(400, f"Invalid tree: {e.error_count()} error(s)")
        return JSONResponse(content={"code": serialize(node)})

    @app.get("/metrics")
    def metrics() -> Response:
        return Response(content=metrics_collector.export(), media_type="text/plain; version=0.0.4")

    logger.info("app_ready", cors=settings.cors_origins)
    return app


settings = get_settings()
configure_logging(settings.log_level, settings.json_logs)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "uiforge.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
