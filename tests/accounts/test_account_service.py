from __future__ import annotations

from datetime import datetime

import pytest

from src.timekeeper.timekeeper.accounts.service import AuthService
from src.timekeeper.timekeeper.core.enums import Role
from src.timekeeper.timekeeper.core.exceptions import AuthenticationError, AuthorizationError, ValidationError


def _add(container, admin, **overrides):
    fields = dict(username="bob", password="pw", hourly_rate="15.5", shift_start="08:00", shift_end="16:00")
    fields.update(overrides)
    return container.account_service.add_employee(current=admin, **fields)


def test_add_employee_persists_hashed_account(container, admin):
    account = _add(container, admin)

    stored = container.accounts_repo.get_by_username("bob")
    assert stored == account
    assert stored.role == Role.EMPLOYEE
    assert stored.hourly_rate == 15.5
    assert (stored.shift_start, stored.shift_end) == ("08:00", "16:00")
    assert stored.password != "pw"
    assert container.auth_service.authenticate("bob", "pw", "employee").username == "bob"


def test_username_is_trimmed(container, admin):
    _add(container, admin, username="  bob  ")
    assert container.accounts_repo.get_by_username("bob") is not None


def test_duplicate_username_is_rejected(container, admin):
    _add(container, admin)
    with pytest.raises(ValidationError, match="already exists"):
        _add(container, admin, password="other")
    with pytest.raises(ValidationError):
        _add(container, admin, username="admin")


@pytest.mark.parametrize(
    "overrides",
    [
        {"username": ""},
        {"username": "   "},
        {"password": ""},
        {"hourly_rate": ""},
        {"hourly_rate": "abc"},
        {"hourly_rate": "-1"},
        {"hourly_rate": "nan"},
        {"hourly_rate": "inf"},
        {"hourly_rate": "1e400"},
        {"hourly_rate": None},
        {"shift_start": ""},
        {"shift_end": "5pm"},
        {"shift_start": "24:00"},
    ],
)
def test_invalid_employee_fields_are_rejected_without_changes(container, admin, overrides):
    before = container.accounts_repo.load_accounts()
    with pytest.raises(ValidationError):
        _add(container, admin, **overrides)
    assert container.accounts_repo.load_accounts() == before


def test_only_admin_manages_accounts(container, admin, alice):
    with pytest.raises(AuthorizationError):
        _add(container, alice)
    with pytest.raises(AuthorizationError):
        container.account_service.delete_employee(current=alice, username="alice")
    with pytest.raises(AuthorizationError):
        container.account_service.list_employees(current=alice)


def test_list_employees_excludes_admin(container, admin, alice):
    _add(container, admin)
    assert [a.username for a in container.account_service.list_employees(current=admin)] == ["alice", "bob"]


def test_delete_cascades_to_only_that_employees_logs(container, admin, alice):
    _add(container, admin)
    bob = container.auth_service.session_for("bob")
    punches = container.punch_service
    for day in (10, 11):
        for user in (alice, bob):
            punches.punch_in(user, now=datetime(2024, 3, day, 8, 0))
            punches.punch_out(user, now=datetime(2024, 3, day, 16, 0))
    punches.punch_in(alice, now=datetime(2024, 3, 12, 9, 0))
    bob_logs = [e for e in container.logs_repo.load_logs() if e.username == "bob"]

    removed = container.account_service.delete_employee(current=admin, username="alice")

    assert removed == 2
    assert container.logs_repo.load_logs() == bob_logs
    assert container.accounts_repo.get_by_username("alice") is None
    assert container.accounts_repo.get_by_username("bob") is not None
    assert "alice" not in container.open_punches_repo.load_open_punches()


def test_cannot_delete_admin_or_unknown_user(container, admin):
    with pytest.raises(ValidationError):
        container.account_service.delete_employee(current=admin, username="admin")
    with pytest.raises(ValidationError):
        container.account_service.delete_employee(current=admin, username="nobody")


@pytest.mark.parametrize(
    "username, password, role",
    [
        ("admin", "wrong", "admin"),
        ("admin", "admin", "employee"),
        ("admin", "admin", "superuser"),
        ("nobody", "admin", "admin"),
        ("", "", "admin"),
    ],
)
def test_login_rejects_bad_credentials_or_role(container, username, password, role):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate(username, password, role)


def test_login_returns_session_with_shift(container, alice):
    s_user = container.auth_service.authenticate(" alice ", "secret", "employee")
    assert s_user.role == Role.EMPLOYEE
    assert s_user.shift_info == "Your shift is scheduled from 09:00 to 17:00."


def test_plain_text_password_from_older_documents_still_works(container):
    container.store.set("accounts", [{"username": "old", "password": "pw", "role": "employee"}])
    auth = AuthService(container.accounts_repo)

    assert auth.authenticate("old", "pw", "employee").username == "old"
    with pytest.raises(AuthenticationError):
        auth.authenticate("old", "PW", "employee")


def test_plain_text_password_containing_dollar_sign_still_works(container):
    container.store.set("accounts", [{"username": "old", "password": "pa$$word", "role": "employee"}])
    auth = AuthService(container.accounts_repo)

    assert auth.authenticate("old", "pa$$word", "employee").username == "old"


def test_session_for_unknown_user_is_none(container):
    assert container.auth_service.session_for("ghost") is None
