"""
Global error handling middleware.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from concierge.domain.exceptions import ConciergeException


async def concierge_exception_handler(
    request: Request, exc: ConciergeException
) -> JSONResponse:
    """
    Handle Concierge domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    status_code_map = {
        "DATABASE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
        "SHUTDOWN_FAILED": status.HTTP_503_SERVICE_UNAVAILABLE,
        "SHUTDOWN_TIMEOUT": status.HTTP_503_SERVICE_UNAVAILABLE,
    }

    status_code = status_code_map.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
        },
    )
