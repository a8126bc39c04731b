"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request, status
from starlette.responses import JSONResponse

from tinyshop.api.http.app_data import ApplicationDependencies
from tinyshop.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "healthy", "service": "api"}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    app_deps: ApplicationDependencies | None = getattr(
        request.app.state, "app_dependencies", None
    )
    config = get_config()

    checks: dict[str, Any] = {}
    backend = "sqlite" if config.database.is_sqlite else "postgresql"
    if app_deps is None:
        checks["database"] = {"status": "unhealthy", "error": "not initialized"}
    elif app_deps.database_service.health_check():
        checks["database"] = {"status": "healthy", "type": backend}
    else:
        checks["database"] = {"status": "unhealthy", "type": backend}

    all_healthy = all(check["status"] == "healthy" for check in checks.values())
    body = {"status": "ready" if all_healthy else "not_ready", "checks": checks}
    if not all_healthy:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body
