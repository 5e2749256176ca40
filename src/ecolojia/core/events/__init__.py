"""Application lifecycle events."""

from ecolojia.core.events.lifespan import build_services, lifespan


__all__ = ["build_services", "lifespan"]
