from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from moon_console.db.models import Account

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreatedAccount:
    user_id: int
    name: str


def make_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    """Short display name: first three chars of each (shorter names used whole)."""
    f = (first_name or "").strip()
    l = (last_name or "").strip()
    return f[:3] + l[:3]


@dataclass
class AccountService:
    """Credential check and the create/update/delete statements on `account`.

    identifier_field selects the column the login identifier is matched
    against: "ssn" (account.ssn) or "username" (account.name).
    """

    identifier_field: str = "ssn"

    def _identifier_column(self):
        if self.identifier_field == "ssn":
            return Account.ssn
        if self.identifier_field == "username":
            return Account.name
        raise ValueError(f"unknown identifier field {self.identifier_field!r}")

    def check_credentials(self, db: Session, identifier: str, password: str) -> bool:
        column = self._identifier_column()
        rows = (
            db.query(column, Account.password)
            .filter(column == identifier, Account.password == password)
            .all()
        )
        # Collations may compare case-insensitively; equality here is exact.
        matches = [r for r in rows if r[0] == identifier and r[1] == password]
        logger.debug("Credential check on %s: %d match(es)", self.identifier_field, len(matches))
        return len(matches) == 1

    def create_account(
        self,
        db: Session,
        *,
        first_name: str,
        last_name: str,
        ssn: str,
        password: str,
    ) -> CreatedAccount:
        account = Account(
            name=make_name(first_name, last_name),
            first_name=first_name,
            last_name=last_name,
            ssn=ssn,
            password=password,
        )
        db.add(account)
        db.flush()
        created = CreatedAccount(user_id=int(account.user_id), name=account.name or "")
        db.commit()
        logger.info("Account created: user_id=%s name=%s", created.user_id, created.name)
        return created

    def update_password(self, db: Session, user_id: int, new_password: str) -> int:
        """Returns the affected row count (0 when no such user)."""
        updated = (
            db.query(Account)
            .filter(Account.user_id == int(user_id))
            .update({Account.password: new_password}, synchronize_session=False)
        )
        db.commit()
        logger.info("Password update for user_id=%s affected %d row(s)", user_id, updated)
        return int(updated)

    def delete_account(self, db: Session, user_id: int) -> int:
        """Returns the affected row count (0 when no such user)."""
        deleted = db.query(Account).filter(Account.user_id == int(user_id)).delete(synchronize_session=False)
        db.commit()
        logger.info("Account delete for user_id=%s affected %d row(s)", user_id, deleted)
        return int(deleted)
