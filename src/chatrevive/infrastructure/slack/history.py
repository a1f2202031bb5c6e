"""Slack conversation history service."""

import asyncio
import logging
from datetime import datetime, timezone

from aiohttp import ClientError
from slack_sdk.errors import SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from chatrevive.domain.entities import Channel, Message, User
from chatrevive.domain.exceptions import TransientFetchError
from chatrevive.infrastructure.slack.users import (
    POSTED_SUBTYPES,
    SlackUserDirectory,
    bot_user_from_payload,
    is_bot_payload,
)

logger = logging.getLogger(__name__)


class SlackConversationHistoryService:
    """Slack implementation of ConversationHistoryService.

    Fetches conversation history using Slack API. Only posts are
    returned; channel events such as topic changes or pins are skipped.
    """

    def __init__(
        self,
        client: AsyncWebClient,
        user_directory: SlackUserDirectory | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            client: Slack AsyncWebClient.
            user_directory: User lookup shared with the event adapter.
        """
        self._client = client
        self._user_directory = user_directory or SlackUserDirectory(client)

    async def fetch_channel_history(
        self,
        channel_id: str,
        limit: int = 20,
    ) -> list[Message]:
        """Fetch channel history.

        Uses conversations.history API.

        Args:
            channel_id: Channel ID.
            limit: Maximum number of messages to fetch.

        Returns:
            List of messages in chronological order (oldest first).

        Raises:
            TransientFetchError: If the Slack API call fails.
        """
        try:
            response = await self._client.conversations_history(
                channel=channel_id,
                limit=limit,
            )

            messages = []
            for msg in response.get("messages", []):
                if msg.get("subtype") not in POSTED_SUBTYPES:
                    continue
                messages.append(await self._to_message(msg, channel_id))
        except (SlackClientError, ClientError, asyncio.TimeoutError) as e:
            raise TransientFetchError(
                channel_id, f"Failed to fetch history for channel {channel_id}: {e}"
            ) from e

        logger.debug("Fetched %d messages from channel %s", len(messages), channel_id)

        # API returns newest first, so reverse to chronological order
        return list(reversed(messages))

    async def _to_message(self, msg: dict, channel_id: str) -> Message:
        """Convert Slack API response to Message entity.

        Args:
            msg: Slack API message object.
            channel_id: Channel ID.

        Returns:
            Message entity.
        """
        user_id = msg.get("user", "")
        if is_bot_payload(msg):
            user = bot_user_from_payload(msg)
        elif user_id:
            user = await self._user_directory.get_user(user_id)
        else:
            user = User(id="", name="Unknown", is_bot=True)

        ts = float(msg["ts"])
        timestamp = datetime.fromtimestamp(ts, tz=timezone.utc)

        return Message(
            id=msg["ts"],
            channel=Channel(id=channel_id, name=""),
            user=user,
            text=msg.get("text", ""),
            timestamp=timestamp,
        )
