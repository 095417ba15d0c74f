"""
Health check API routes.

Kubernetes-compatible liveness and readiness probes.
"""

from fastapi import APIRouter, Depends, Response, status

from concierge.presentation.api.dependencies import get_server

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    Liveness probe endpoint.

    Returns 200 while the process can serve requests at all.
    """
    return {"status": "healthy"}


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(response: Response, server=Depends(get_server)):
    """
    Readiness probe endpoint.

    Checks:
    - Database connectivity
    - Redis connectivity (if enabled)

    Returns 200 if ready, 503 if degraded.
    """
    database_status = "unavailable"
    database_info = None
    if server.database is not None:
        if await server.database.health_check():
            database_status = "healthy"
        else:
            database_status = "unhealthy"
    if server.database_error is not None:
        database_info = server.database_error.message

    if server.cache is None:
        cache_status = "disabled"
    elif await server.cache.ping():
        cache_status = "healthy"
    else:
        cache_status = "unhealthy"

    components_healthy = database_status == "healthy" and cache_status in (
        "healthy",
        "disabled",
    )
    if not components_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if components_healthy else "degraded",
        "version": server.config.APP_VERSION,
        "components": {
            "database": {"status": database_status, "info": database_info},
            "cache": {
                "status": cache_status,
                "enabled": server.config.REDIS_ENABLED,
            },
        },
        "shutting_down": server.shutdown_signal.is_set(),
    }


@router.get("", status_code=status.HTTP_200_OK)
async def health_check_endpoint(response: Response, server=Depends(get_server)):
    """General health check endpoint (alias for readiness)."""
    return await readiness_probe(response, server)
