"""Domain exceptions."""


class TransientFetchError(Exception):
    """Message history could not be retrieved.

    Raised by history services on network or authorization failures.
    """

    def __init__(self, channel_id: str, message: str = "") -> None:
        """Initialize.

        Args:
            channel_id: Channel whose history was requested.
            message: Error message (optional).
        """
        self.channel_id = channel_id
        super().__init__(message or f"Failed to fetch history for channel {channel_id}")


class DeliveryError(Exception):
    """A message could not be delivered to a channel."""

    def __init__(self, channel_id: str, message: str = "") -> None:
        """Initialize.

        Args:
            channel_id: Target channel ID.
            message: Error message (optional).
        """
        self.channel_id = channel_id
        super().__init__(message or f"Failed to deliver message to channel {channel_id}")


class ChannelNotAccessibleError(DeliveryError):
    """チャンネルにアクセスできない場合に発生する例外

    ボットがチャンネルから退出した場合や、
    チャンネルがアーカイブされた場合などに発生する。
    """

    def __init__(self, channel_id: str, message: str = "") -> None:
        """初期化

        Args:
            channel_id: アクセスできないチャンネルのID
            message: エラーメッセージ（オプション）
        """
        super().__init__(channel_id, message or f"Channel {channel_id} is not accessible")
