"""Domain entities."""

from chatrevive.domain.entities.channel import Channel
from chatrevive.domain.entities.message import Message
from chatrevive.domain.entities.revival import (
    RevivalContext,
    RevivalResult,
    RevivalState,
)
from chatrevive.domain.entities.user import User

__all__ = [
    "Channel",
    "Message",
    "RevivalContext",
    "RevivalResult",
    "RevivalState",
    "User",
]
