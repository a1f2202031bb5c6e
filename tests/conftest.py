"""Common fixtures."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from chatrevive.config import PersonaConfig, RevivalConfig
from chatrevive.domain.entities import Channel, Message, User

MessageFactory = Callable[..., Message]


@pytest.fixture
def now() -> datetime:
    """Reference time for tests."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def human() -> User:
    """Create test human user."""
    return User(id="U123", name="alice", is_bot=False)


@pytest.fixture
def bot() -> User:
    """Create test bot user."""
    return User(id="B123", name="helperbot", is_bot=True)


@pytest.fixture
def channel() -> Channel:
    """Create test channel."""
    return Channel(id="C123", name="general")


@pytest.fixture
def persona() -> PersonaConfig:
    """Create test persona config."""
    return PersonaConfig(name="Sakura")


@pytest.fixture
def revival_config() -> RevivalConfig:
    """Create revival config with defaults."""
    return RevivalConfig(
        cooldown_seconds=60,
        quiet_window_seconds=300,
        min_human_messages=2,
        history_limit=100,
        context_limit=8,
        context_max_chars=200,
    )


@pytest.fixture
def make_message(
    now: datetime, human: User, channel: Channel
) -> MessageFactory:
    """Factory for messages posted a number of seconds before `now`."""
    counter = iter(range(1, 1_000_000))

    def factory(
        text: str = "hello",
        seconds_ago: float = 0,
        user: User | None = None,
        msg_channel: Channel | None = None,
    ) -> Message:
        return Message(
            id=f"m{next(counter)}",
            channel=msg_channel or channel,
            user=user or human,
            text=text,
            timestamp=now - timedelta(seconds=seconds_ago),
        )

    return factory
