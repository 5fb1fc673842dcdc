"""Application lifecycle events."""

from recipe_engine.core.events.lifespan import lifespan


__all__ = ["lifespan"]
