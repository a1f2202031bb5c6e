"""Cooldown repository protocol."""

from datetime import datetime
from typing import Protocol


class CooldownRepository(Protocol):
    """チャンネルごとの最終応答時刻を保持するリポジトリの抽象インターフェース

    クールダウン判定に使う時刻の保存・取得を抽象化する。
    """

    def find_last_reply(self, channel_id: str) -> datetime | None:
        """最終応答時刻を取得する

        Args:
            channel_id: チャンネル ID

        Returns:
            最終応答時刻（未応答の場合は None）
        """
        ...

    def save_last_reply(self, channel_id: str, replied_at: datetime) -> None:
        """最終応答時刻を保存する

        Args:
            channel_id: チャンネル ID
            replied_at: 応答時刻
        """
        ...
