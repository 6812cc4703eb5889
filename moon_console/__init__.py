"""Moon Mission console: login + CRUD menu over the account / moon_mission tables."""

from .core.settings import Settings

__all__ = ["Settings"]
