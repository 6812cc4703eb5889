from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from moon_console.cli.console import Console
from moon_console.services.account_service import AccountService

logger = logging.getLogger(__name__)

IDENTIFIER_LABELS = {
    "ssn": "SSN",
    "username": "Username",
}


class LoginController:
    """Prompts for identifier + password until the check passes or the user exits."""

    def __init__(self, console: Console, db: Session, accounts: AccountService) -> None:
        self._console = console
        self._db = db
        self._accounts = accounts
        self.label = IDENTIFIER_LABELS[accounts.identifier_field]

    def authenticate(self, identifier: str, password: str) -> bool:
        return self._accounts.check_credentials(self._db, identifier, password)

    def run(self) -> bool:
        """True once logged in; False when the user chose to exit."""
        attempts = 0
        while True:
            identifier = self._console.prompt(f"{self.label}: ")
            password = self._console.prompt("Password: ")
            attempts += 1

            if self.authenticate(identifier, password):
                logger.debug("Login succeeded after %d attempt(s)", attempts)
                return True

            logger.debug("Login attempt %d rejected", attempts)
            self._console.println(f"Invalid {self.label} or password")
            self._console.println("1) Try again")
            self._console.println("0) Exit...")
            choice = self._console.read_line()
            if choice == "0" or self._console.exhausted:
                return False
