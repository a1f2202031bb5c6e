"""Domain service protocols."""

from typing import Protocol

from chatrevive.domain.entities import Message, RevivalContext


class ConversationHistoryService(Protocol):
    """Conversation history retrieval abstraction (platform-independent).

    This protocol defines the interface for fetching conversation history
    from any messaging platform (Slack, Discord, etc.).
    """

    async def fetch_channel_history(
        self,
        channel_id: str,
        limit: int = 20,
    ) -> list[Message]:
        """Fetch channel history.

        Args:
            channel_id: Channel ID.
            limit: Maximum number of messages to fetch.

        Returns:
            List of messages in chronological order (oldest first).

        Raises:
            TransientFetchError: If the history could not be retrieved.
        """
        ...


class MessagingService(Protocol):
    """Messaging abstraction (platform-independent).

    This protocol defines the interface for sending messages
    to any messaging platform (Slack, Discord, etc.).
    """

    async def send_message(self, channel_id: str, text: str) -> None:
        """Send a message to a channel.

        Args:
            channel_id: Target channel ID.
            text: Message content.

        Raises:
            DeliveryError: If the message could not be delivered.
        """
        ...


class ReplyGenerator(Protocol):
    """Revival reply generation abstraction.

    Implementations must not raise: every generation failure
    (timeout, HTTP error, malformed payload) is reported as None.
    """

    async def generate(self, context: RevivalContext) -> str | None:
        """Generate a revival reply.

        Args:
            context: Persona and recent conversation lines.

        Returns:
            Reply text, or None if no reply is available.
        """
        ...
