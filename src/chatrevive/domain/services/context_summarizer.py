"""Conversation context summarization for revival prompts."""

import re
from collections.abc import Sequence

from chatrevive.domain.entities import Message

_NEWLINE_PATTERN = re.compile(r"\r\n|\r|\n")


def format_context_line(message: Message, max_chars: int) -> str:
    """Format a message as a single bounded context line.

    Args:
        message: The message to format.
        max_chars: Maximum characters kept from the message text.

    Returns:
        String like "username: message text" with no newlines.
    """
    content = _NEWLINE_PATTERN.sub(" ", message.text)[:max_chars]
    return f"{message.user.name}: {content}"


def build_context(
    recent_messages: Sequence[Message],
    max_messages: int,
    max_chars_per_message: int,
) -> list[str]:
    """Reduce recent messages to bounded context lines.

    Args:
        recent_messages: Messages in chronological order (oldest first).
        max_messages: Number of most recent messages to consider.
        max_chars_per_message: Per-message character cap.

    Returns:
        Context lines, oldest first, with bot messages left out.
    """
    if max_messages <= 0:
        return []
    window = recent_messages[-max_messages:]
    return [
        format_context_line(message, max_chars_per_message)
        for message in window
        if not message.is_from_bot()
    ]
