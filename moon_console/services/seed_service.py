from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from moon_console.db.base import Base
from moon_console.db.models import Account, MoonMission
from moon_console.services.account_service import make_name

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).resolve().parents[1] / "data" / "seed.yaml"


def load_seed(path: Optional[str | Path] = None) -> Dict[str, Any]:
    seed_path = Path(path) if path else DEFAULT_SEED_FILE
    if not seed_path.exists():
        raise FileNotFoundError(f"Seed file not found: {seed_path}")
    with seed_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Seed file {seed_path} must contain a mapping")
    return data


def ensure_schema(engine: Engine) -> None:
    """Create `account` / `moon_mission` if missing (dev mode and tests only)."""
    Base.metadata.create_all(bind=engine)


def seed_database(db: Session, data: Optional[Dict[str, Any]] = None) -> Dict[str, int]:
    """Insert seed rows into empty tables. Returns counts inserted per table."""
    data = data if data is not None else load_seed()
    summary = {"account": 0, "moon_mission": 0}

    if db.query(Account).count() == 0:
        for row in data.get("accounts") or []:
            db.add(
                Account(
                    name=make_name(row.get("first_name"), row.get("last_name")),
                    password=row.get("password"),
                    first_name=row.get("first_name"),
                    last_name=row.get("last_name"),
                    ssn=row.get("ssn"),
                )
            )
            summary["account"] += 1

    if db.query(MoonMission).count() == 0:
        for row in data.get("moon_missions") or []:
            db.add(MoonMission(**row))
            summary["moon_mission"] += 1

    db.commit()
    logger.info("Seeded %d account(s), %d moon mission(s)", summary["account"], summary["moon_mission"])
    return summary
