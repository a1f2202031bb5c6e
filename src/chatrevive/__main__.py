"""アプリケーションのエントリポイント"""

import asyncio
import logging
import os
import signal
import sys
from pathlib import Path

from aiohttp import ClientError
from slack_sdk.errors import SlackClientError

from chatrevive.application.use_cases import ReviveChannelUseCase
from chatrevive.config import ConfigError, LoggingConfig, load_config
from chatrevive.domain.services import CooldownGate
from chatrevive.infrastructure.http import HealthServer
from chatrevive.infrastructure.llm import LiteLLMReplyGenerator, LLMClient
from chatrevive.infrastructure.persistence import InMemoryCooldownRepository
from chatrevive.infrastructure.slack import (
    SlackAppRunner,
    SlackConversationHistoryService,
    SlackEventAdapter,
    SlackMessagingService,
    SlackUserDirectory,
    create_slack_app,
)
from chatrevive.presentation import register_handlers

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "CHATREVIVE_CONFIG"


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    # Get root logger
    root_logger = logging.getLogger()

    # Set root level
    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Update handler format if specified
    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    # Configure individual loggers
    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


async def main() -> None:
    """アプリケーションを起動する"""
    config_path = Path(os.environ.get(CONFIG_PATH_ENV, "config.yaml"))
    if not config_path.exists():
        logger.error("%s not found", config_path)
        sys.exit(1)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        logger.error("Failed to load config: %s", e)
        sys.exit(1)

    # Apply logging configuration
    configure_logging(config.logging)

    app = create_slack_app(config.slack)

    # Get bot user ID (also verifies the bot token)
    messaging_service = SlackMessagingService(app.client)
    try:
        bot_user_id = await messaging_service.get_bot_user_id()
    except (SlackClientError, ClientError, asyncio.TimeoutError) as e:
        logger.error("Failed to authenticate with Slack: %s", e)
        sys.exit(1)
    logger.info("Bot user ID: %s", bot_user_id)

    # Build dependencies
    user_directory = SlackUserDirectory(app.client)
    event_adapter = SlackEventAdapter(app.client, user_directory=user_directory)
    conversation_history_service = SlackConversationHistoryService(
        app.client, user_directory=user_directory
    )

    llm_client = LLMClient(config.llm["default"])
    debug_llm_messages = bool(config.logging and config.logging.debug_llm_messages)
    reply_generator = LiteLLMReplyGenerator(
        llm_client,
        debug_llm_messages=debug_llm_messages,
    )

    cooldown_gate = CooldownGate(InMemoryCooldownRepository())

    revive_use_case = ReviveChannelUseCase(
        cooldown_gate=cooldown_gate,
        conversation_history_service=conversation_history_service,
        reply_generator=reply_generator,
        messaging_service=messaging_service,
        persona=config.persona,
        config=config.revival,
    )

    pending_tasks = register_handlers(
        app,
        revive_use_case,
        event_adapter,
        messaging_service,
        config.persona,
    )

    runner = SlackAppRunner(app, config.slack.app_token)

    health_server: HealthServer | None = None
    if config.health.enabled:
        health_server = HealthServer(
            slack_runner=runner,
            bot_name=config.persona.name,
            port=config.health.port,
        )
        await health_server.start()

    logger.info("Starting %s...", config.persona.name)
    logger.info(
        "Revival settings: cooldown=%ds, quiet_window=%ds, min_human_messages=%d",
        config.revival.cooldown_seconds,
        config.revival.quiet_window_seconds,
        config.revival.min_human_messages,
    )
    logger.info("Starting Socket Mode handler...")

    runner_task = asyncio.create_task(runner.start())

    # Setup signal handlers for graceful shutdown
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def shutdown_handler() -> None:
        logger.info("Received shutdown signal...")
        stop_event.set()

    loop.add_signal_handler(signal.SIGINT, shutdown_handler)
    loop.add_signal_handler(signal.SIGTERM, shutdown_handler)

    # Wait for shutdown signal or runner exit
    stop_task = asyncio.create_task(stop_event.wait())
    await asyncio.wait(
        {runner_task, stop_task}, return_when=asyncio.FIRST_COMPLETED
    )

    # Graceful shutdown
    logger.info("Shutting down...")

    closed = await runner.close(timeout=5.0)
    if not closed:
        logger.warning("Runner close timed out, cancelling tasks...")

    runner_task.cancel()
    stop_task.cancel()
    for task in list(pending_tasks):
        task.cancel()

    results = await asyncio.gather(
        runner_task, stop_task, *pending_tasks, return_exceptions=True
    )
    for result in results:
        if isinstance(result, Exception):
            logger.error("Task ended with error: %s", result)

    if health_server is not None:
        await health_server.stop()

    logger.info("Shutdown complete")


def run() -> None:
    """Run the async main function."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
