"""Tests for Message entity."""

import dataclasses
from datetime import datetime

import pytest

from chatrevive.domain.entities import Channel, Message, User


class TestMessage:
    """Message entity tests."""

    def test_is_from_bot(self, channel: Channel, bot: User, now: datetime) -> None:
        """Test that bot authorship is read from the user."""
        message = Message(id="1", channel=channel, user=bot, text="hi", timestamp=now)

        assert message.is_from_bot() is True

    def test_human_message_is_not_from_bot(
        self, channel: Channel, human: User, now: datetime
    ) -> None:
        """Test that human messages are not bot messages."""
        message = Message(
            id="1", channel=channel, user=human, text="hi", timestamp=now
        )

        assert message.is_from_bot() is False

    def test_shared_channel(self, channel: Channel, human: User, now: datetime) -> None:
        """Test that regular channels are shared."""
        message = Message(
            id="1", channel=channel, user=human, text="hi", timestamp=now
        )

        assert message.is_in_shared_channel() is True

    def test_direct_message_is_not_shared(self, human: User, now: datetime) -> None:
        """Test that direct conversations are not shared channels."""
        dm = Channel(id="D123", name="", is_direct=True)
        message = Message(id="1", channel=dm, user=human, text="hi", timestamp=now)

        assert message.is_in_shared_channel() is False

    def test_message_is_immutable(
        self, channel: Channel, human: User, now: datetime
    ) -> None:
        """Test that messages are read-only snapshots."""
        message = Message(
            id="1", channel=channel, user=human, text="hi", timestamp=now
        )

        with pytest.raises(dataclasses.FrozenInstanceError):
            message.text = "changed"  # type: ignore[misc]
