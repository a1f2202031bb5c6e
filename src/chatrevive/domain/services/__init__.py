"""Domain services."""

from chatrevive.domain.services.activity_window import channel_is_quiet, is_quiet
from chatrevive.domain.services.context_summarizer import (
    build_context,
    format_context_line,
)
from chatrevive.domain.services.cooldown_gate import CooldownGate
from chatrevive.domain.services.protocols import (
    ConversationHistoryService,
    MessagingService,
    ReplyGenerator,
)

__all__ = [
    "ConversationHistoryService",
    "CooldownGate",
    "MessagingService",
    "ReplyGenerator",
    "build_context",
    "channel_is_quiet",
    "format_context_line",
    "is_quiet",
]
