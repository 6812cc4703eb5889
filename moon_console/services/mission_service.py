from __future__ import annotations

from typing import List, Optional

from sqlalchemy import extract, func
from sqlalchemy.orm import Session

from moon_console.db.models import MoonMission


class MissionService:
    """Read-only queries over the `moon_mission` reference table."""

    def list_spacecraft(self, db: Session) -> List[str]:
        rows = db.query(MoonMission.spacecraft).order_by(MoonMission.mission_id.asc()).all()
        return [r[0] for r in rows]

    def get_mission(self, db: Session, mission_id: int) -> Optional[MoonMission]:
        # populate_existing: a row loaded earlier in this session is re-read, not reused.
        return (
            db.query(MoonMission)
            .populate_existing()
            .filter(MoonMission.mission_id == int(mission_id))
            .one_or_none()
        )

    def count_by_year(self, db: Session, year: int) -> int:
        count = (
            db.query(func.count(MoonMission.mission_id))
            .filter(extract("year", MoonMission.launch_date) == int(year))
            .scalar()
        )
        return int(count or 0)
