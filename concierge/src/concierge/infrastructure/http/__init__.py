"""
HTTP listener infrastructure.
"""

from concierge.infrastructure.http.uvicorn_server import (
    UvicornHttpServer,
    parse_address,
)

__all__ = ["UvicornHttpServer", "parse_address"]
