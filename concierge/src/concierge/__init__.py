"""
Concierge - Web service bootstrap

Builds the HTTP router, database handle and cache client for one process
and shuts them down in order on interrupt.
"""

__version__ = "0.1.0"
