"""Slack Bolt app factory and Socket Mode runner."""

import asyncio
import logging

from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from slack_bolt.async_app import AsyncApp

from chatrevive.config import SlackConfig

logger = logging.getLogger(__name__)


def create_slack_app(config: SlackConfig) -> AsyncApp:
    """Create the Bolt app authenticated with the bot token."""
    return AsyncApp(token=config.bot_token)


class SlackAppRunner:
    """Own the Socket Mode connection of an AsyncApp.

    start() returns only after stop() or close() is called, so it can be
    awaited as a task alongside the shutdown signal.
    """

    def __init__(self, app: AsyncApp, app_token: str) -> None:
        """Initialize the runner.

        Args:
            app: AsyncApp with handlers registered.
            app_token: App-Level Token (xapp-...) for Socket Mode.
        """
        self._app = app
        self._app_token = app_token
        self._handler: AsyncSocketModeHandler | None = None
        self._connected = False
        self._stopped = asyncio.Event()

    @property
    def is_connected(self) -> bool:
        """True between a successful connect and shutdown."""
        return self._connected

    async def start(self) -> None:
        """Open the Socket Mode connection and wait for shutdown."""
        self._stopped.clear()
        self._handler = AsyncSocketModeHandler(self._app, self._app_token)
        await self._handler.connect_async()
        self._connected = True
        logger.info("Socket Mode connected")
        try:
            await self._stopped.wait()
        finally:
            self._connected = False
            logger.info("Socket Mode runner finished")

    async def stop(self) -> None:
        """Close the connection and release start()."""
        self._connected = False
        self._stopped.set()
        if self._handler is not None:
            await self._handler.close_async()

    async def close(self, timeout: float = 5.0) -> bool:
        """Like stop(), bounded by a timeout.

        Args:
            timeout: Maximum seconds to wait for the handler to close.

        Returns:
            False if closing timed out, True otherwise.
        """
        self._connected = False
        self._stopped.set()
        if self._handler is None:
            return True
        try:
            await asyncio.wait_for(self._handler.close_async(), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Socket Mode close timed out after %.1fs", timeout)
            return False
        return True
