"""Slack messaging service."""

import asyncio

from aiohttp import ClientError
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from chatrevive.domain.exceptions import ChannelNotAccessibleError, DeliveryError

# Error codes that indicate the channel is not accessible
_CHANNEL_NOT_ACCESSIBLE_ERRORS = frozenset(
    {
        "not_in_channel",
        "channel_not_found",
        "is_archived",
    }
)


class SlackMessagingService:
    """Slack implementation of MessagingService.

    This class implements the MessagingService protocol for Slack,
    providing message sending capabilities.
    """

    def __init__(self, client: AsyncWebClient) -> None:
        """Initialize the service.

        Args:
            client: Slack AsyncWebClient instance.
        """
        self._client = client
        self._bot_user_id: str | None = None

    async def send_message(self, channel_id: str, text: str) -> None:
        """Send a message to a Slack channel.

        Args:
            channel_id: Target channel ID.
            text: Message content.

        Raises:
            ChannelNotAccessibleError: If the channel is not accessible
                (not_in_channel, channel_not_found, is_archived).
            DeliveryError: If the API call fails for other reasons.
        """
        try:
            await self._client.chat_postMessage(channel=channel_id, text=text)
        except SlackApiError as e:
            error_code = e.response.get("error", "") if e.response is not None else ""
            if error_code in _CHANNEL_NOT_ACCESSIBLE_ERRORS:
                raise ChannelNotAccessibleError(
                    channel_id, f"Cannot access channel {channel_id}: {error_code}"
                ) from e
            raise DeliveryError(
                channel_id, f"Failed to post to channel {channel_id}: {e!s}"
            ) from e
        except (SlackClientError, ClientError, asyncio.TimeoutError) as e:
            raise DeliveryError(
                channel_id, f"Failed to post to channel {channel_id}: {e!s}"
            ) from e

    async def get_bot_user_id(self) -> str:
        """Get the bot's user ID.

        Returns:
            The bot's user ID.

        Note:
            The result is cached after the first call.
        """
        if self._bot_user_id is None:
            response = await self._client.auth_test()
            self._bot_user_id = response["user_id"]
        return self._bot_user_id
