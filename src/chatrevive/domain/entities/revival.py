"""Revival entities."""

from dataclasses import dataclass, field
from enum import Enum

from chatrevive.config.models import PersonaConfig
from chatrevive.domain.entities.message import Message


class RevivalState(Enum):
    """Terminal states of a single revival attempt."""

    IGNORED = "ignored"
    SUPPRESSED = "suppressed"
    SENT = "sent"
    DELIVERY_FAILED = "delivery_failed"


@dataclass(frozen=True)
class RevivalContext:
    """Input handed to the reply generator.

    Attributes:
        persona: Bot persona configuration.
        lines: Ordered "<author>: <content>" lines, oldest first.
            The last line is the message that triggered the attempt.
        trigger: The message that triggered the attempt.
    """

    persona: PersonaConfig
    lines: tuple[str, ...]
    trigger: Message


@dataclass(frozen=True)
class RevivalResult:
    """Outcome of a single revival attempt.

    Attributes:
        state: Terminal state reached.
        reason: Why the attempt ended there (for logging/tests).
        reply_text: Text that was sent or attempted, if any.
    """

    state: RevivalState
    reason: str = ""
    reply_text: str | None = field(default=None)

    @property
    def sent(self) -> bool:
        """Check if a reply was delivered."""
        return self.state is RevivalState.SENT
