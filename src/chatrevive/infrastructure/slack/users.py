"""Slack user lookup and message payload helpers."""

from slack_sdk.web.async_client import AsyncWebClient

from chatrevive.domain.entities import User

# Message subtypes that are posts by people or apps. Everything else
# (edits, deletions, joins, topic changes, pins) is a channel event.
POSTED_SUBTYPES = frozenset(
    {None, "bot_message", "thread_broadcast", "file_share"}
)


class SlackUserDirectory:
    """Resolve Slack user IDs to User entities.

    Results are cached for the lifetime of the process to minimize
    users.info calls.
    """

    def __init__(self, client: AsyncWebClient) -> None:
        """Initialize the directory.

        Args:
            client: Slack AsyncWebClient.
        """
        self._client = client
        self._cache: dict[str, User] = {}

    async def get_user(self, user_id: str) -> User:
        """Get user from cache or fetch from Slack API.

        Args:
            user_id: Slack user ID.

        Returns:
            User entity.

        Raises:
            SlackApiError: If the API call fails.
        """
        cached = self._cache.get(user_id)
        if cached is not None:
            return cached

        user_info = await self._client.users_info(user=user_id)
        user_data = user_info["user"]
        profile = user_data.get("profile") or {}

        user = User(
            id=user_data["id"],
            name=profile.get("display_name") or user_data["name"],
            is_bot=user_data.get("is_bot", False),
        )
        self._cache[user_id] = user
        return user


def bot_user_from_payload(msg: dict) -> User:
    """Build a bot User from a message posted by an app or integration.

    Args:
        msg: Slack message payload carrying bot_id / bot_profile.

    Returns:
        User entity with is_bot set.
    """
    bot_profile = msg.get("bot_profile") or {}
    return User(
        id=msg.get("bot_id") or msg.get("user") or "",
        name=msg.get("username") or bot_profile.get("name") or "bot",
        is_bot=True,
    )


def is_bot_payload(msg: dict) -> bool:
    """Check if a Slack message payload was posted by a bot."""
    return bool(msg.get("bot_id")) or msg.get("subtype") == "bot_message"
