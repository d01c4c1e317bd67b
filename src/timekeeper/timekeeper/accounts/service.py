from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_clock_time, require_non_empty, require_rate
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..punches.repository import LogRepository, OpenPunchRepository
from .model import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)

# Method prefixes written by werkzeug.security.generate_password_hash.
_HASH_PREFIXES = ("scrypt:", "pbkdf2:")


@dataclass(frozen=True)
class SessionUser:
    """The logged-in user, passed explicitly to every service call."""

    username: str
    role: Role
    hourly_rate: Optional[float] = None
    shift_start: Optional[str] = None
    shift_end: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_account(cls, account: Account) -> "SessionUser":
        return cls(
            username=account.username,
            role=account.role,
            hourly_rate=account.hourly_rate,
            shift_start=account.scheduled_start,
            shift_end=account.scheduled_end,
        )

    @property
    def shift_info(self) -> str:
        return f"Your shift is scheduled from {self.shift_start} to {self.shift_end}."


def require_admin(current: SessionUser) -> None:
    if not current.is_admin:
        raise AuthorizationError("Admin access required")


def password_matches(stored: str, password: str) -> bool:
    if not stored.startswith(_HASH_PREFIXES):
        # Documents written before hashing was introduced keep plain text.
        return hmac.compare_digest(stored.encode(), password.encode())
    try:
        return check_password_hash(stored, password)
    except ValueError:
        # e.g. unknown hash method or corrupted value
        return False


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    def authenticate(self, username: str, password: str, role: str) -> SessionUser:
        username = (username or "").strip()
        try:
            role_enum = Role(role)
        except ValueError:
            raise AuthenticationError("Invalid credentials or role.")

        account = self._accounts.get_by_username(username)
        if not account or account.role != role_enum or not password_matches(account.password, password or ""):
            logger.info("Rejected login for %r as %s", username, role)
            raise AuthenticationError("Invalid credentials or role.")

        logger.info("User %r logged in as %s", username, account.role.value)
        return SessionUser.from_account(account)

    def session_for(self, username: str) -> Optional[SessionUser]:
        """Rebuild the session user from storage (None once the account is gone)."""
        account = self._accounts.get_by_username(username)
        if not account:
            return None
        return SessionUser.from_account(account)


class AccountService:
    """Use case: manage employee accounts (admin)."""

    def __init__(self, accounts: AccountRepository, logs: LogRepository, open_punches: OpenPunchRepository):
        self._accounts = accounts
        self._logs = logs
        self._open_punches = open_punches

    def list_employees(self, *, current: SessionUser) -> list[Account]:
        require_admin(current)
        return [a for a in self._accounts.load_accounts() if a.role == Role.EMPLOYEE]

    def add_employee(
        self,
        *,
        current: SessionUser,
        username: str,
        password: str,
        hourly_rate,
        shift_start: str,
        shift_end: str,
    ) -> Account:
        require_admin(current)

        username = require_non_empty(username, "Username")
        if not password:
            raise ValidationError("Password is required")
        rate = require_rate(hourly_rate, "Hourly rate")
        shift_start = require_clock_time(shift_start, "Shift start")
        shift_end = require_clock_time(shift_end, "Shift end")

        accounts = self._accounts.load_accounts()
        if any(a.username == username for a in accounts):
            raise ValidationError("Username already exists.")

        account = Account(
            username=username,
            password=generate_password_hash(password),
            role=Role.EMPLOYEE,
            hourly_rate=rate,
            shift_start=shift_start,
            shift_end=shift_end,
        )
        accounts.append(account)
        self._accounts.save_accounts(accounts)
        logger.info("Employee %r added by %r", username, current.username)
        return account

    def delete_employee(self, *, current: SessionUser, username: str) -> int:
        """Delete an employee together with all of their log entries.

        Returns the number of log entries removed.
        """
        require_admin(current)

        accounts = self._accounts.load_accounts()
        account = next((a for a in accounts if a.username == username), None)
        if not account:
            raise ValidationError("Employee not found")
        if account.role == Role.ADMIN:
            raise ValidationError("Admin accounts cannot be deleted")

        logs = self._logs.load_logs()
        kept = [e for e in logs if e.username != username]
        self._logs.save_logs(kept)

        open_punches = self._open_punches.load_open_punches()
        if open_punches.pop(username, None) is not None:
            self._open_punches.save_open_punches(open_punches)

        self._accounts.save_accounts([a for a in accounts if a.username != username])

        removed = len(logs) - len(kept)
        logger.info("Employee %r deleted by %r (%d log entries removed)", username, current.username, removed)
        return removed
