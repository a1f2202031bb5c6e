"""Tests for SlackEventAdapter."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from chatrevive.infrastructure.slack import SlackEventAdapter


@pytest.fixture
def mock_client() -> MagicMock:
    """Create mock Slack AsyncWebClient."""
    client = MagicMock()
    client.users_info = AsyncMock(
        return_value={
            "user": {
                "id": "U123",
                "name": "alice",
                "is_bot": False,
                "profile": {"display_name": "Alice"},
            }
        }
    )
    return client


@pytest.fixture
def adapter(mock_client: MagicMock) -> SlackEventAdapter:
    """Create adapter instance."""
    return SlackEventAdapter(client=mock_client)


def create_event(**overrides) -> dict:
    """Create a Slack message event payload."""
    event = {
        "type": "message",
        "channel": "C123",
        "channel_type": "channel",
        "user": "U123",
        "text": "anyone around?",
        "ts": "1704110400.000100",
    }
    event.update(overrides)
    return event


class TestToMessage:
    """Tests for to_message."""

    async def test_converts_channel_message(self, adapter: SlackEventAdapter) -> None:
        """Test conversion of a regular channel message."""
        message = await adapter.to_message(create_event())

        assert message.id == "1704110400.000100"
        assert message.channel.id == "C123"
        assert message.channel.is_direct is False
        assert message.user.id == "U123"
        assert message.user.name == "Alice"
        assert message.user.is_bot is False
        assert message.text == "anyone around?"
        assert message.timestamp == datetime.fromtimestamp(
            1704110400.0001, tz=timezone.utc
        )

    @pytest.mark.parametrize("channel_type", ["im", "mpim"])
    async def test_direct_conversations(
        self, adapter: SlackEventAdapter, channel_type: str
    ) -> None:
        """Test that DMs and group DMs are flagged as direct."""
        message = await adapter.to_message(create_event(channel_type=channel_type))

        assert message.channel.is_direct is True
        assert message.is_in_shared_channel() is False

    async def test_private_channel_is_shared(self, adapter: SlackEventAdapter) -> None:
        """Test that private channels count as shared channels."""
        message = await adapter.to_message(create_event(channel_type="group"))

        assert message.channel.is_direct is False

    async def test_bot_message(
        self, adapter: SlackEventAdapter, mock_client: MagicMock
    ) -> None:
        """Test that app posts become bot users without a lookup."""
        event = create_event(
            subtype="bot_message",
            bot_id="B42",
            username="otherbot",
        )
        del event["user"]

        message = await adapter.to_message(event)

        assert message.user.is_bot is True
        assert message.user.id == "B42"
        assert message.user.name == "otherbot"
        mock_client.users_info.assert_not_awaited()

    async def test_missing_user_is_treated_as_bot(
        self, adapter: SlackEventAdapter
    ) -> None:
        """Test that events without an author are not treated as human."""
        event = create_event()
        del event["user"]

        message = await adapter.to_message(event)

        assert message.user.is_bot is True

    async def test_missing_text(self, adapter: SlackEventAdapter) -> None:
        """Test that events without text produce an empty message."""
        event = create_event()
        del event["text"]

        message = await adapter.to_message(event)

        assert message.text == ""
