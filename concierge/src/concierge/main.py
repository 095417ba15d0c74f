"""
Concierge entry point.

Builds the lifecycle coordinator, runs the HTTP listener next to the
shutdown watcher and turns lifecycle failures into a fatal exit.
"""

import asyncio
import sys

from concierge.config.settings import Settings, get_settings
from concierge.domain.exceptions import HttpServerError, ShutdownError
from concierge.infrastructure.monitoring import get_logger, setup_logging
from concierge.lifecycle import new_server

logger = get_logger(__name__)


async def run(settings: Settings) -> int:
    """
    Serve until shutdown completes.

    Args:
        settings: Loaded application settings

    Returns:
        Process exit status (0 on clean shutdown, 1 on fatal error)
    """
    server = await new_server(settings)

    if server.database_error is not None and settings.DATABASE_REQUIRED:
        logger.critical(f"Aborting startup: {server.database_error.message}")
        await server.database.close()
        return 1

    if settings.SERVE_STATIC_FILES:
        server.serve_static_files()

    listener = asyncio.create_task(server.start(settings.address), name="listener")
    lifecycle = asyncio.create_task(server.graceful_shutdown(), name="lifecycle")

    try:
        done, _ = await asyncio.wait(
            {listener, lifecycle}, return_when=asyncio.FIRST_COMPLETED
        )
        if listener in done:
            listener.result()
        await lifecycle
        if not listener.done():
            await listener
    except (HttpServerError, ShutdownError) as e:
        logger.critical(e.message, exc_info=e.__cause__ is not None)
        return 1
    finally:
        pending = [task for task in (listener, lifecycle) if not task.done()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    logger.info(f"{settings.APP_NAME} stopped")
    return 0


def main() -> None:
    """Run the service with settings from the environment."""
    settings = get_settings()

    json_logs = settings.ENV == "production"
    setup_logging(
        level=settings.LOG_LEVEL, json_logs=json_logs, service=settings.APP_NAME
    )

    sys.exit(asyncio.run(run(settings)))


if __name__ == "__main__":
    main()
