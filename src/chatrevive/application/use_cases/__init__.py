"""Use cases."""

from chatrevive.application.use_cases.revive_channel import ReviveChannelUseCase

__all__ = ["ReviveChannelUseCase"]
