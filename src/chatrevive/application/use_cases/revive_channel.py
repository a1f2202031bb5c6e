"""Revive quiet channel use case."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from chatrevive.config import PersonaConfig, RevivalConfig
from chatrevive.domain.entities import (
    Message,
    RevivalContext,
    RevivalResult,
    RevivalState,
)
from chatrevive.domain.exceptions import DeliveryError, TransientFetchError
from chatrevive.domain.services import (
    ConversationHistoryService,
    CooldownGate,
    MessagingService,
    ReplyGenerator,
    build_context,
    channel_is_quiet,
    format_context_line,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReviveChannelUseCase:
    """Use case for reviving a channel that has gone quiet.

    Runs once per inbound message. When the channel is past its cooldown
    and has seen too little human activity inside the quiet window,
    a short reply is generated and posted. The cooldown is committed
    only after the reply has been delivered.
    """

    def __init__(
        self,
        cooldown_gate: CooldownGate,
        conversation_history_service: ConversationHistoryService,
        reply_generator: ReplyGenerator,
        messaging_service: MessagingService,
        persona: PersonaConfig,
        config: RevivalConfig,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the use case.

        Args:
            cooldown_gate: Per-channel reply cooldown.
            conversation_history_service: Service for fetching channel history.
            reply_generator: Service for generating revival replies.
            messaging_service: Service for sending messages.
            persona: Bot persona configuration.
            config: Revival settings.
            clock: Returns the current time (timezone-aware).
        """
        self._cooldown_gate = cooldown_gate
        self._conversation_history_service = conversation_history_service
        self._reply_generator = reply_generator
        self._messaging_service = messaging_service
        self._persona = persona
        self._config = config
        self._clock = clock

    async def execute(self, message: Message) -> RevivalResult:
        """Execute the use case.

        Processing flow:
        1. Ignore bot messages and direct messages
        2. Check the channel cooldown
        3. Check the quiet window
        4. Build context from recent messages
        5. Generate a reply
        6. Send the reply
        7. Record the reply in the cooldown gate

        Steps 2-7 run under the channel's gate lock.

        Args:
            message: The inbound message that triggered the check.

        Returns:
            The terminal state reached.
        """
        # 1. Ignore bot messages and direct messages
        if message.is_from_bot():
            return RevivalResult(RevivalState.IGNORED, "bot author")
        if not message.is_in_shared_channel():
            return RevivalResult(RevivalState.IGNORED, "direct message")

        async with self._cooldown_gate.lock(message.channel.id):
            result = await self._attempt(message)

        if result.state is RevivalState.SUPPRESSED:
            logger.info(
                "Revival suppressed in channel %s: %s",
                message.channel.id,
                result.reason,
            )
        return result

    async def _attempt(self, message: Message) -> RevivalResult:
        """Run the gated part of the flow (caller holds the channel lock)."""
        channel_id = message.channel.id
        now = self._clock()

        # 2. Check the channel cooldown
        if not self._cooldown_gate.can_reply(
            channel_id, now, self._config.cooldown_seconds
        ):
            return RevivalResult(RevivalState.SUPPRESSED, "cooldown active")

        # 3. Check the quiet window
        quiet = await channel_is_quiet(
            self._conversation_history_service,
            channel_id,
            history_limit=self._config.history_limit,
            window_seconds=self._config.quiet_window_seconds,
            min_human_messages=self._config.min_human_messages,
            now=now,
        )
        if not quiet:
            return RevivalResult(RevivalState.SUPPRESSED, "channel not quiet")

        # 4. Build context from recent messages
        context = await self._build_context(message)

        # 5. Generate a reply
        reply_text = await self._reply_generator.generate(context)
        if not reply_text or not reply_text.strip():
            return RevivalResult(RevivalState.SUPPRESSED, "no reply generated")

        # 6. Send the reply
        logger.info("Sending revival reply to channel %s", channel_id)
        try:
            await self._messaging_service.send_message(
                channel_id=channel_id,
                text=reply_text,
            )
        except DeliveryError as e:
            logger.error("Failed to deliver revival reply to %s: %s", channel_id, e)
            return RevivalResult(
                RevivalState.DELIVERY_FAILED, str(e), reply_text=reply_text
            )

        # 7. Record the reply in the cooldown gate
        self._cooldown_gate.record_reply(channel_id, self._clock())
        return RevivalResult(RevivalState.SENT, reply_text=reply_text)

    async def _build_context(self, message: Message) -> RevivalContext:
        """Build the generation context.

        Recent human messages come first, the trigger message last.
        A failed fetch leaves only the trigger line.

        Args:
            message: The trigger message.

        Returns:
            RevivalContext instance.
        """
        try:
            recent = await self._conversation_history_service.fetch_channel_history(
                channel_id=message.channel.id,
                limit=self._config.context_limit,
            )
        except TransientFetchError as e:
            logger.warning(
                "Context fetch failed for channel %s: %s", message.channel.id, e
            )
            recent = []

        lines = build_context(
            recent,
            max_messages=self._config.context_limit,
            max_chars_per_message=self._config.context_max_chars,
        )
        trigger_line = format_context_line(message, self._config.context_max_chars)

        return RevivalContext(
            persona=self._persona,
            lines=(*lines, trigger_line),
            trigger=message,
        )
