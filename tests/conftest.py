from __future__ import annotations

from datetime import datetime

import pytest

from src.timekeeper.timekeeper.accounts.service import SessionUser
from src.timekeeper.timekeeper.container import build_container
from src.timekeeper.timekeeper.core.enums import Role
from src.timekeeper.timekeeper.storage.backend import MemoryBlobBackend
from src.timekeeper.timekeeper.storage.defaults import ensure_defaults


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 10, 9, 2, 30)


@pytest.fixture
def backend() -> MemoryBlobBackend:
    return MemoryBlobBackend()


@pytest.fixture
def container(backend):
    c = build_container(backend=backend)
    ensure_defaults(c.store)
    return c


@pytest.fixture
def admin() -> SessionUser:
    return SessionUser(username="admin", role=Role.ADMIN)


@pytest.fixture
def alice(container, admin) -> SessionUser:
    container.account_service.add_employee(
        current=admin,
        username="alice",
        password="secret",
        hourly_rate="20",
        shift_start="09:00",
        shift_end="17:00",
    )
    return container.auth_service.session_for("alice")
