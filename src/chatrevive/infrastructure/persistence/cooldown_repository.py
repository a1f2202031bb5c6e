"""In-memory implementation of CooldownRepository."""

from datetime import datetime


class InMemoryCooldownRepository:
    """インメモリ版 CooldownRepository 実装

    プロセス生存期間中のみ保持する。レコードは削除しない。
    """

    def __init__(self) -> None:
        """初期化"""
        self._last_reply_at: dict[str, datetime] = {}

    def find_last_reply(self, channel_id: str) -> datetime | None:
        """最終応答時刻を取得する

        Args:
            channel_id: チャンネル ID

        Returns:
            最終応答時刻（未応答の場合は None）
        """
        return self._last_reply_at.get(channel_id)

    def save_last_reply(self, channel_id: str, replied_at: datetime) -> None:
        """最終応答時刻を保存する

        Args:
            channel_id: チャンネル ID
            replied_at: 応答時刻
        """
        self._last_reply_at[channel_id] = replied_at

    def __len__(self) -> int:
        return len(self._last_reply_at)
