"""Persistence infrastructure."""

from chatrevive.infrastructure.persistence.cooldown_repository import (
    InMemoryCooldownRepository,
)

__all__ = ["InMemoryCooldownRepository"]
