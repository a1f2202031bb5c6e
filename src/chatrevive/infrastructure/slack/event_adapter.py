"""Slack event adapter."""

from datetime import datetime, timezone

from slack_sdk.web.async_client import AsyncWebClient

from chatrevive.domain.entities import Channel, Message, User
from chatrevive.infrastructure.slack.users import (
    SlackUserDirectory,
    bot_user_from_payload,
    is_bot_payload,
)

# Conversation types that are not shared workspace channels
_DIRECT_CHANNEL_TYPES = frozenset({"im", "mpim"})


class SlackEventAdapter:
    """Convert Slack events to domain entities.

    This adapter translates Slack-specific event payloads into
    platform-independent domain entities.
    """

    def __init__(
        self,
        client: AsyncWebClient,
        user_directory: SlackUserDirectory | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            client: Slack AsyncWebClient for fetching user info.
            user_directory: User lookup shared with the history service.
        """
        self._client = client
        self._user_directory = user_directory or SlackUserDirectory(client)

    async def to_message(self, event: dict) -> Message:
        """Convert a Slack message event to a Message entity.

        Args:
            event: Slack message event payload.

        Returns:
            Message entity.
        """
        user = await self._resolve_user(event)

        channel = Channel(
            id=event["channel"],
            name="",  # Channel name not provided in event
            is_direct=event.get("channel_type") in _DIRECT_CHANNEL_TYPES,
        )

        ts = event["ts"]
        timestamp = datetime.fromtimestamp(float(ts), tz=timezone.utc)

        return Message(
            id=ts,
            channel=channel,
            user=user,
            text=event.get("text", ""),
            timestamp=timestamp,
        )

    async def _resolve_user(self, event: dict) -> User:
        """Resolve the author of an event.

        Args:
            event: Slack message event payload.

        Returns:
            User entity.
        """
        if is_bot_payload(event):
            return bot_user_from_payload(event)

        user_id = event.get("user", "")
        if not user_id:
            return User(id="", name="Unknown", is_bot=True)

        return await self._user_directory.get_user(user_id)
