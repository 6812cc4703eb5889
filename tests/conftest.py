from __future__ import annotations

import io
from pathlib import Path
import sys
from typing import Iterable, Tuple

# Ensure repo root is importable
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


import pytest

from moon_console.cli.app import run
from moon_console.core.settings import Settings
from moon_console.db.session import DBRuntime, create_engine_and_sessionmaker
from moon_console.services.seed_service import ensure_schema, seed_database

SEEDED_SSN = "371108-9221"
SEEDED_PASSWORD = "MB=V4cbAqPz4vqmQ"


@pytest.fixture()
def runtime() -> DBRuntime:
    rt = create_engine_and_sessionmaker("sqlite://")
    ensure_schema(rt.engine)
    with rt.SessionLocal() as db:
        seed_database(db)
    yield rt
    rt.engine.dispose()


@pytest.fixture()
def db(runtime: DBRuntime):
    with runtime.SessionLocal() as session:
        yield session


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        db_user="test",
        db_password="test",
        login_identifier="ssn",
        dev_mode=False,
    )


@pytest.fixture()
def run_console(runtime: DBRuntime, settings: Settings):
    """Feed lines to one session; returns (exit code, captured stdout)."""

    def _run(lines: Iterable[str], *, settings_override: Settings | None = None) -> Tuple[int, str]:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        code = run(settings_override or settings, stdin=stdin, stdout=stdout, runtime=runtime)
        return code, stdout.getvalue()

    return _run
