"""Quiet-window evaluation."""

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta

from chatrevive.domain.entities import Message
from chatrevive.domain.exceptions import TransientFetchError
from chatrevive.domain.services.protocols import ConversationHistoryService

logger = logging.getLogger(__name__)


def is_quiet(
    recent_messages: Iterable[Message],
    window_seconds: int,
    min_human_messages: int,
    now: datetime,
) -> bool:
    """Decide whether a channel counts as quiet.

    Only messages posted at or after ``now - window_seconds`` are considered.
    The channel is active as soon as ``min_human_messages`` of them come
    from non-bot authors.

    Args:
        recent_messages: Recent channel messages, in any order.
        window_seconds: Length of the trailing window.
        min_human_messages: Human messages that make the channel active.
        now: Reference time.

    Returns:
        True if the channel is quiet (empty history included).
    """
    cutoff = now - timedelta(seconds=window_seconds)
    human_count = 0
    for message in recent_messages:
        if message.timestamp < cutoff:
            continue
        if not message.is_from_bot():
            human_count += 1
        if human_count >= min_human_messages:
            return False
    return True


async def channel_is_quiet(
    history_service: ConversationHistoryService,
    channel_id: str,
    *,
    history_limit: int,
    window_seconds: int,
    min_human_messages: int,
    now: datetime,
) -> bool:
    """Fetch recent history and evaluate the quiet window.

    A history fetch failure reports the channel as not quiet.

    Args:
        history_service: Source of channel history.
        channel_id: Channel to evaluate.
        history_limit: Maximum messages to fetch.
        window_seconds: Length of the trailing window.
        min_human_messages: Human messages that make the channel active.
        now: Reference time.

    Returns:
        True if the channel is quiet.
    """
    try:
        messages = await history_service.fetch_channel_history(
            channel_id=channel_id,
            limit=history_limit,
        )
    except TransientFetchError as e:
        logger.warning("Quiet check failed for channel %s: %s", channel_id, e)
        return False

    return is_quiet(messages, window_seconds, min_human_messages, now)
