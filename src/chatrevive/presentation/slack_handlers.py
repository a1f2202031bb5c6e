"""Slack event handlers."""

import asyncio
import logging
from typing import Any

from slack_bolt.async_app import AsyncApp

from chatrevive.application.use_cases import ReviveChannelUseCase
from chatrevive.config import PersonaConfig
from chatrevive.domain.entities import Message
from chatrevive.domain.exceptions import DeliveryError
from chatrevive.domain.services import MessagingService
from chatrevive.infrastructure.slack import SlackEventAdapter
from chatrevive.infrastructure.slack.users import POSTED_SUBTYPES

logger = logging.getLogger(__name__)

PING_COMMAND = "!ping"


def _is_thread_reply(event: dict[str, Any]) -> bool:
    """Check if the event is a reply inside a thread (not broadcast)."""
    thread_ts = event.get("thread_ts")
    return (
        thread_ts is not None
        and thread_ts != event.get("ts")
        and event.get("subtype") != "thread_broadcast"
    )


def ping_reply(persona: PersonaConfig) -> str:
    """Build the fixed reply to the ping command."""
    return f"{persona.name} is here to revive the vibes 🌸✨"


def register_handlers(
    app: AsyncApp,
    revive_use_case: ReviveChannelUseCase,
    event_adapter: SlackEventAdapter,
    messaging_service: MessagingService,
    persona: PersonaConfig,
) -> set[asyncio.Task[None]]:
    """Register Slack event handlers.

    Each inbound message starts its own revival task so the handler
    returns immediately.

    Args:
        app: AsyncApp instance.
        revive_use_case: Use case for reviving quiet channels.
        event_adapter: Adapter for converting events to entities.
        messaging_service: Service for sending messages.
        persona: Bot persona configuration.

    Returns:
        The live set of in-flight revival tasks.
    """
    pending: set[asyncio.Task[None]] = set()

    async def run_revival(message: Message) -> None:
        try:
            result = await revive_use_case.execute(message)
        except Exception:
            logger.exception("Error running revival for message %s", message.id)
            return
        logger.debug(
            "Revival for message %s ended in %s (%s)",
            message.id,
            result.state.value,
            result.reason,
        )

    async def answer_ping(message: Message) -> None:
        try:
            await messaging_service.send_message(
                channel_id=message.channel.id,
                text=ping_reply(persona),
            )
        except DeliveryError as e:
            logger.error("Failed to answer ping in %s: %s", message.channel.id, e)

    @app.event("message")
    async def handle_message(event: dict) -> None:
        """Handle message events.

        Answers the ping command and schedules a revival check
        for every newly posted top-level message.

        Args:
            event: Slack event payload.
        """
        subtype = event.get("subtype")
        if subtype not in POSTED_SUBTYPES or _is_thread_reply(event):
            return

        logger.debug(
            "Processing message event: ts=%s, subtype=%s, channel=%s",
            event.get("ts"),
            subtype,
            event.get("channel"),
        )

        try:
            message = await event_adapter.to_message(event)
        except Exception:
            logger.exception("Error converting event to message")
            return

        if (
            not message.is_from_bot()
            and message.text.strip().lower() == PING_COMMAND
        ):
            await answer_ping(message)

        task = asyncio.create_task(run_revival(message))
        pending.add(task)
        task.add_done_callback(pending.discard)

    return pending
