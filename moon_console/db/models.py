from __future__ import annotations

import datetime as dt
from typing import Optional

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from moon_console.db.base import Base


# The schema is owned by the external store; these mappings only describe it.
# create_all() is used for dev mode and tests.


class Account(Base):
    __tablename__ = "account"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    # Plain text, compared as stored.
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    ssn: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"Account(user_id={self.user_id!r}, name={self.name!r})"


class MoonMission(Base):
    __tablename__ = "moon_mission"

    mission_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    spacecraft: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    launch_date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    carrier_rocket: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    operator: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    mission_type: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    outcome: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"MoonMission(mission_id={self.mission_id!r}, spacecraft={self.spacecraft!r})"
