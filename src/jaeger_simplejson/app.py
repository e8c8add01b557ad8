"""Application bootstrap and lifecycle management."""

from typing import Protocol

import httpx

from .config import Settings
from .handler import ISimpleJSONHandler, SimpleJSONHandler
from .jaeger import JaegerClient
from .links import LinkBuilder
from .logging_config import get_logger

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    @property
    def handler(self) -> ISimpleJSONHandler:
        """Handler serving dashboard requests."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

        # Components (will be initialized in start())
        self._http: httpx.AsyncClient | None = None
        self._jaeger: JaegerClient | None = None
        self._links: LinkBuilder | None = None
        self._handler: SimpleJSONHandler | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application, jaeger at %s", self._settings.base_url)

        # 1. Shared HTTP client (no dependencies)
        self._http = httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            transport=self._transport,
        )

        # 2. Jaeger client: fetcher and service catalog
        self._jaeger = JaegerClient(self._http, self._settings.base_url)

        # 3. Links into the Jaeger UI
        self._links = LinkBuilder(self._settings.link_url)

        # 4. Handler (depends on all of the above)
        self._handler = SimpleJSONHandler(
            fetcher=self._jaeger,
            catalog=self._jaeger,
            links=self._links,
        )
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._handler = None
        if self._http:
            await self._http.aclose()
            self._http = None
            logger.info("HTTP client closed")

    @property
    def handler(self) -> SimpleJSONHandler:
        """Get handler instance."""
        if not self._handler:
            raise RuntimeError("Application not started")
        return self._handler
