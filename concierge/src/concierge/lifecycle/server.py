"""
Process lifecycle coordinator.

Owns the HTTP listener, the database handle and the cache client for the
lifetime of the process, and tears them down in a fixed order once a
shutdown signal arrives.
"""

import time
from typing import Awaitable, Callable, Optional

from concierge.config.settings import Settings
from concierge.domain.exceptions import DatabaseConnectionError, ShutdownError
from concierge.domain.services import IDatabase, IHttpServer
from concierge.domain.value_objects import ShutdownDeadline
from concierge.infrastructure.cache import ICacheClient, build_cache
from concierge.infrastructure.monitoring import get_logger, metrics
from concierge.infrastructure.persistence import Database
from concierge.lifecycle.signals import InterruptSignal, ShutdownSignal
from concierge.presentation.api.router import new_router

logger = get_logger(__name__)

SHUTDOWN_TIMEOUT_SECONDS = 5.0


class Server:
    """
    Lifecycle coordinator for one process.

    Handles built at construction are exposed unchanged through the
    read-only accessors. A handle is either the object that was built or
    None; the database handle may be present but unusable when its
    construction-time open failed (see database_error).

    Shutdown order is cache, database, then HTTP listener. The first
    failing step aborts the sequence.
    """

    def __init__(
        self,
        settings: Settings,
        shutdown_signal: Optional[ShutdownSignal] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Create an empty coordinator shell.

        Use new_server() to build a fully assembled coordinator.

        Args:
            settings: Loaded application settings
            shutdown_signal: Trigger to wait on (SIGINT if None)
            clock: Monotonic clock used for the shutdown deadline
        """
        self._config = settings
        self._clock = clock
        self._shutdown_signal = shutdown_signal or InterruptSignal(clock=clock)
        self._http: Optional[IHttpServer] = None
        self._database: Optional[IDatabase] = None
        self._cache: Optional[ICacheClient] = None
        self.database_error: Optional[DatabaseConnectionError] = None

    # ================================================================
    # Accessors
    # ================================================================

    @property
    def config(self) -> Settings:
        """Settings the coordinator was built with."""
        return self._config

    @property
    def database(self) -> Optional[IDatabase]:
        """Database handle."""
        return self._database

    @property
    def cache(self) -> Optional[ICacheClient]:
        """Cache client, None when Redis is disabled."""
        return self._cache

    @property
    def http(self) -> Optional[IHttpServer]:
        """HTTP listener."""
        return self._http

    @property
    def shutdown_signal(self) -> ShutdownSignal:
        """Trigger graceful_shutdown() waits on."""
        return self._shutdown_signal

    # ================================================================
    # Serving
    # ================================================================

    async def start(self, address: Optional[str] = None) -> None:
        """
        Run the HTTP listener until it stops.

        Args:
            address: host:port to bind (settings address if None)

        Raises:
            HttpServerError: If the listener fails
        """
        await self._http.start(address or self._config.address)

    def serve_static_files(self) -> None:
        """Serve ASSETS_BUILD_DIR at / (development only)."""
        self._http.static("/", self._config.ASSETS_BUILD_DIR)

    # ================================================================
    # Shutdown
    # ================================================================

    async def graceful_shutdown(self) -> None:
        """
        Wait for the shutdown signal, then close every resource in order.

        The HTTP listener gets SHUTDOWN_TIMEOUT_SECONDS, counted from the
        moment the signal was received, to drain in-flight requests. Cache
        and database closes are not bounded.

        Raises:
            ShutdownError: From the first step that fails; later steps
                are not attempted
        """
        self._shutdown_signal.install()

        try:
            received_at = await self._shutdown_signal.wait()
            logger.info(
                f"Shutdown requested ({self._shutdown_signal.reason}), "
                f"closing resources"
            )

            deadline = ShutdownDeadline(
                started_at=received_at,
                timeout=SHUTDOWN_TIMEOUT_SECONDS,
                clock=self._clock,
            )

            if self._cache is not None:
                await self._run_step("cache", self._cache.close)

            if self._database is not None:
                await self._run_step("database", self._database.close)

            await self._run_step("http", lambda: self._http.shutdown(deadline))

            logger.info("Graceful shutdown completed successfully")
        finally:
            self._shutdown_signal.uninstall()

    async def _run_step(
        self, step: str, action: Callable[[], Awaitable[None]]
    ) -> None:
        """Run one shutdown step, converting its failure to ShutdownError."""
        started = time.perf_counter()

        try:
            await action()
        except ShutdownError:
            metrics.shutdown_failures_total.labels(step=step).inc()
            raise
        except Exception as e:
            metrics.shutdown_failures_total.labels(step=step).inc()
            raise ShutdownError(step, str(e) or type(e).__name__) from e
        finally:
            metrics.shutdown_step_duration_seconds.labels(step=step).observe(
                time.perf_counter() - started
            )

        logger.info(f"Shutdown step '{step}' complete")


async def new_server(
    settings: Settings,
    *,
    shutdown_signal: Optional[ShutdownSignal] = None,
    router_factory: Callable[[Server], IHttpServer] = new_router,
    database_factory: Callable[[Settings], IDatabase] = Database.from_settings,
    cache_factory: Callable[[Settings], Optional[ICacheClient]] = build_cache,
    clock: Callable[[], float] = time.monotonic,
) -> Server:
    """
    Build the coordinator and open its database.

    The router receives the coordinator itself so request handlers can
    reach its accessors. A database that cannot be reached is logged and
    recorded on database_error; construction still succeeds.

    Args:
        settings: Loaded application settings
        shutdown_signal: Trigger to wait on (SIGINT if None)
        router_factory: Builds the HTTP listener from the coordinator
        database_factory: Builds the (closed) database handle
        cache_factory: Builds the cache client, or None
        clock: Monotonic clock used for the shutdown deadline

    Returns:
        Assembled coordinator
    """
    server = Server(settings, shutdown_signal=shutdown_signal, clock=clock)
    server._http = router_factory(server)
    server._database = database_factory(settings)
    server._cache = cache_factory(settings)

    try:
        await server._database.open_with_config(settings)
    except DatabaseConnectionError as e:
        metrics.database_connect_failures_total.inc()
        logger.error(str(e))
        server.database_error = e

    logger.info(f"{settings.APP_NAME} server assembled (ENV={settings.ENV})")
    return server
