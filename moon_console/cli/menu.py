from __future__ import annotations

import logging
from typing import Callable, Dict

from sqlalchemy.orm import Session

from moon_console.cli.console import Console
from moon_console.db.models import MoonMission
from moon_console.services.account_service import AccountService
from moon_console.services.mission_service import MissionService

logger = logging.getLogger(__name__)

MENU_ITEMS = (
    "1) List moon missions.",
    "2) Get a moon mission by mission_id.",
    "3) Count missions for a given year.",
    "4) Create an account.",
    "5) Update an account password.",
    "6) Delete an account.",
    "0) Exit.",
)


def format_mission(mission: MoonMission) -> list[str]:
    launch = mission.launch_date.isoformat() if mission.launch_date is not None else None
    return [
        f"Mission ID: {mission.mission_id}",
        f"Spacecraft: {mission.spacecraft}",
        f"Launch Date: {launch}",
        f"Carrier Rocket: {mission.carrier_rocket}",
        f"Operator: {mission.operator}",
        f"Mission Type: {mission.mission_type}",
        f"Outcome: {mission.outcome}",
    ]


class MenuDispatcher:
    """Main menu loop. Every operation is one statement against the open session.

    Non-numeric input for mission id, year or user id raises
    InvalidNumberError and ends the run.
    """

    def __init__(
        self,
        console: Console,
        db: Session,
        *,
        missions: MissionService,
        accounts: AccountService,
    ) -> None:
        self._console = console
        self._db = db
        self._missions = missions
        self._accounts = accounts

        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.list_missions,
            "2": self.show_mission,
            "3": self.count_missions_by_year,
            "4": self.create_account,
            "5": self.update_password,
            "6": self.delete_account,
        }

    def print_menu(self) -> None:
        self._console.println("Welcome to the Moon Mission Database, User!")
        for item in MENU_ITEMS:
            self._console.println(item)

    def run(self) -> None:
        while True:
            self.print_menu()
            choice = self._console.prompt("Select an option:")
            if choice == "0":
                return
            if self._console.exhausted:
                logger.warning("Input closed before exit was selected")
                return

            action = self._actions.get(choice)
            if action is None:
                self._console.println("invalid option")
                continue
            action()

    # ---------------- moon_mission ----------------
    def list_missions(self) -> None:
        for name in self._missions.list_spacecraft(self._db):
            self._console.println(name)

    def show_mission(self) -> None:
        mission_id = self._console.prompt_int("mission_id: ", field="mission_id").unwrap()
        mission = self._missions.get_mission(self._db, mission_id)
        if mission is None:
            self._console.println("Not found")
            return
        for line in format_mission(mission):
            self._console.println(line)

    def count_missions_by_year(self) -> None:
        year = self._console.prompt_int("year", field="year").unwrap()
        count = self._missions.count_by_year(self._db, year)
        self._console.println(f"{year}: {count}")

    # ---------------- account ----------------
    def create_account(self) -> None:
        first_name = self._console.prompt("First name: ")
        last_name = self._console.prompt("Last name: ")
        ssn = self._console.prompt("SSN: ")
        password = self._console.prompt("Password: ")

        created = self._accounts.create_account(
            self._db,
            first_name=first_name,
            last_name=last_name,
            ssn=ssn,
            password=password,
        )
        self._console.println(f"Account created for {created.name}")

    def update_password(self) -> None:
        user_id = self._console.prompt_int("User ID: ", field="user_id").unwrap()
        new_password = self._console.prompt("New Password: ")

        if self._accounts.update_password(self._db, user_id, new_password) == 0:
            self._console.println(f"No account found with user ID {user_id}")
        else:
            self._console.println(f"Password updated for user ID {user_id}")

    def delete_account(self) -> None:
        user_id = self._console.prompt_int("User ID: ", field="user_id").unwrap()

        if self._accounts.delete_account(self._db, user_id) == 0:
            self._console.println(f"No account found with user ID {user_id}")
        else:
            self._console.println(f"Account deleted for user ID {user_id}")
