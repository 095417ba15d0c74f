"""
Domain service interfaces.
"""

from concierge.domain.services.i_closable import IClosable
from concierge.domain.services.i_database import IDatabase
from concierge.domain.services.i_http_server import IHttpServer

__all__ = [
    "IClosable",
    "IDatabase",
    "IHttpServer",
]
