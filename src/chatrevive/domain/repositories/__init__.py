"""Domain repositories."""

from chatrevive.domain.repositories.cooldown_repository import CooldownRepository

__all__ = ["CooldownRepository"]
