"""HTTP infrastructure."""

from chatrevive.infrastructure.http.health_server import HealthServer

__all__ = ["HealthServer"]
