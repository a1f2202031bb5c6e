"""Message entity."""

from dataclasses import dataclass
from datetime import datetime

from chatrevive.domain.entities.channel import Channel
from chatrevive.domain.entities.user import User


@dataclass(frozen=True)
class Message:
    """Read-only snapshot of a single message.

    Attributes:
        id: Platform-specific message ID.
        channel: Channel where the message was posted.
        user: User who sent the message.
        text: Message content.
        timestamp: When the message was sent (timezone-aware).
    """

    id: str
    channel: Channel
    user: User
    text: str
    timestamp: datetime

    def is_from_bot(self) -> bool:
        """Check if this message was authored by a bot account."""
        return self.user.is_bot

    def is_in_shared_channel(self) -> bool:
        """Check if this message was posted in a shared (non-direct) channel."""
        return not self.channel.is_direct
