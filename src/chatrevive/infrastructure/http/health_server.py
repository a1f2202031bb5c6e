"""Keep-alive and health check HTTP server."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from aiohttp import web

if TYPE_CHECKING:
    from chatrevive.infrastructure.slack.client import SlackAppRunner

logger = logging.getLogger(__name__)


class HealthServer:
    """Small HTTP server answering hosting platform probes.

    Routes:
        /       plain text "<bot name> is alive!"
        /live   process liveness (always 200 once serving)
        /ready  200 while the Slack connection is up, 503 otherwise
    """

    def __init__(
        self,
        slack_runner: SlackAppRunner,
        bot_name: str,
        port: int = 3000,
    ) -> None:
        """Initialize the health server.

        Args:
            slack_runner: SlackAppRunner whose connection decides readiness.
            bot_name: Persona name shown on the root endpoint.
            port: Port to listen on. Use 0 for any available port.
        """
        self._slack_runner = slack_runner
        self._bot_name = bot_name
        self._requested_port = port
        self._bound_port = port
        self._runner: web.AppRunner | None = None
        self._started_monotonic: float | None = None

    @property
    def is_running(self) -> bool:
        """Check if the server is accepting requests."""
        return self._runner is not None

    @property
    def port(self) -> int:
        """Port actually bound (differs from the requested one when it was 0)."""
        return self._bound_port

    def _uptime_seconds(self) -> float:
        if self._started_monotonic is None:
            return 0.0
        return round(time.monotonic() - self._started_monotonic, 3)

    async def check_liveness(self) -> dict[str, Any]:
        """Report that the process is serving.

        Returns:
            Liveness payload with timestamp and uptime.
        """
        return {
            "status": "alive",
            "bot": self._bot_name,
            "uptime_seconds": self._uptime_seconds(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    async def check_readiness(self) -> dict[str, Any]:
        """Report whether inbound Slack events can be received.

        Returns:
            Readiness payload; "ready" mirrors the Slack connection.
        """
        slack_connected = self._slack_runner.is_connected
        return {"ready": slack_connected, "slack": slack_connected}

    def create_app(self) -> web.Application:
        """Build the aiohttp application with the probe routes."""
        app = web.Application()
        app.add_routes(
            [
                web.get("/", self._root),
                web.get("/live", self._live),
                web.get("/ready", self._ready),
            ]
        )
        return app

    async def _root(self, request: web.Request) -> web.Response:
        return web.Response(text=f"{self._bot_name} is alive!")

    async def _live(self, request: web.Request) -> web.Response:
        return web.json_response(await self.check_liveness())

    async def _ready(self, request: web.Request) -> web.Response:
        payload = await self.check_readiness()
        return web.json_response(payload, status=200 if payload["ready"] else 503)

    async def start(self) -> None:
        """Bind and start serving on all interfaces."""
        runner = web.AppRunner(self.create_app())
        await runner.setup()
        await web.TCPSite(runner, "0.0.0.0", self._requested_port).start()

        # addresses holds the bound socknames; needed when port 0 was requested
        if runner.addresses:
            self._bound_port = runner.addresses[0][1]

        self._runner = runner
        self._started_monotonic = time.monotonic()
        logger.info("Health server listening on port %d", self._bound_port)

    async def stop(self) -> None:
        """Stop serving and release the port."""
        if self._runner is None:
            return
        await self._runner.cleanup()
        self._runner = None
        self._started_monotonic = None
        logger.info("Health server stopped")
