from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence, TextIO

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from moon_console.cli.console import Console
from moon_console.cli.login import LoginController
from moon_console.cli.menu import MenuDispatcher
from moon_console.core.errors import MoonConsoleError
from moon_console.core.settings import Settings
from moon_console.db.session import DBRuntime, build_database_url, create_engine_and_sessionmaker
from moon_console.services.account_service import AccountService
from moon_console.services.mission_service import MissionService
from moon_console.services.seed_service import ensure_schema, seed_database

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    # stdout carries the interactive protocol; logs go to stderr.
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT, stream=sys.stderr)


def run_session(console: Console, db: Session, settings: Settings) -> None:
    """Login loop, then the menu loop, over one open session."""
    accounts = AccountService(identifier_field=settings.login_identifier)
    login = LoginController(console, db, accounts)
    if not login.run():
        logger.info("Exit chosen at login")
        return

    MenuDispatcher(console, db, missions=MissionService(), accounts=accounts).run()
    logger.info("Session ended")


def run(
    settings: Optional[Settings] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    runtime: Optional[DBRuntime] = None,
) -> int:
    """Run one interactive session. Returns 0 on a normal exit.

    Configuration and store errors propagate to the caller. A runtime passed in
    is used as-is and left open; otherwise one is built from settings and
    disposed on return.
    """
    settings = settings or Settings()
    owns_runtime = runtime is None
    if runtime is None:
        url, user, password = settings.require_database()
        database_url = build_database_url(url, username=user, password=password)
        logger.info("Connecting to %s", database_url.render_as_string(hide_password=True))
        runtime = create_engine_and_sessionmaker(database_url, echo=settings.db_echo)

    try:
        if settings.dev_mode:
            ensure_schema(runtime.engine)
            with runtime.SessionLocal() as db:
                seed_database(db)

        console = Console(stdin, stdout)
        with runtime.SessionLocal() as db:
            run_session(console, db, settings)
        return 0
    finally:
        if owns_runtime:
            runtime.engine.dispose()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    overrides = {}
    if "--dev" in args:
        overrides["dev_mode"] = True

    try:
        settings = Settings(**overrides)
    except ValueError as e:
        configure_logging()
        logger.error("Invalid configuration: %s", e)
        return 1

    configure_logging(settings.log_level)
    try:
        return run(settings)
    except MoonConsoleError:
        logger.exception("Aborting")
        return 1
    except SQLAlchemyError:
        logger.exception("Database error, aborting")
        return 1


if __name__ == "__main__":
    sys.exit(main())
