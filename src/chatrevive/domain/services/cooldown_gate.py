"""Per-channel reply cooldown."""

import asyncio
from datetime import datetime, timedelta

from chatrevive.domain.repositories import CooldownRepository


class CooldownGate:
    """Tracks the last revival reply per channel.

    The record store is injected. Callers that check and later commit
    for the same channel should hold ``lock(channel_id)`` across both
    steps so overlapping attempts cannot both pass the gate.
    """

    def __init__(self, repository: CooldownRepository) -> None:
        """Initialize the gate.

        Args:
            repository: Store for last-reply timestamps.
        """
        self._repository = repository
        self._locks: dict[str, asyncio.Lock] = {}

    def lock(self, channel_id: str) -> asyncio.Lock:
        """Get the lock serializing gate decisions for a channel.

        Args:
            channel_id: Channel ID.

        Returns:
            The channel's lock (created on first use).
        """
        return self._locks.setdefault(channel_id, asyncio.Lock())

    def last_reply_at(self, channel_id: str) -> datetime | None:
        """Get the last recorded reply time for a channel."""
        return self._repository.find_last_reply(channel_id)

    def can_reply(
        self,
        channel_id: str,
        now: datetime,
        cooldown_seconds: int,
    ) -> bool:
        """Check whether the cooldown for a channel has elapsed.

        Args:
            channel_id: Channel ID.
            now: Reference time.
            cooldown_seconds: Required gap since the last reply.

        Returns:
            True if the channel has no record or the gap has elapsed.
        """
        last = self._repository.find_last_reply(channel_id)
        if last is None:
            return True
        return now - last >= timedelta(seconds=cooldown_seconds)

    def record_reply(self, channel_id: str, now: datetime) -> None:
        """Record a successful reply.

        An earlier timestamp never replaces a later one.

        Args:
            channel_id: Channel ID.
            now: Time the reply was delivered.
        """
        last = self._repository.find_last_reply(channel_id)
        if last is not None and last > now:
            return
        self._repository.save_last_reply(channel_id, now)
