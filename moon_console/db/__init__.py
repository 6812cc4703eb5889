"""Database package.

ORM mappings of the externally owned `account` / `moon_mission` tables plus
engine/session bootstrap.
"""

from .base import Base
from .session import create_engine_and_sessionmaker

__all__ = ["Base", "create_engine_and_sessionmaker"]
