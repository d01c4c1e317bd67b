"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

from datetime import datetime

from src.timekeeper.timekeeper.container import build_container
from src.timekeeper.timekeeper.storage.backend import MemoryBlobBackend
from src.timekeeper.timekeeper.storage.defaults import ensure_defaults


def main():
    container = build_container(backend=MemoryBlobBackend())
    ensure_defaults(container.store)

    admin = container.auth_service.authenticate("admin", "admin", "admin")
    container.account_service.add_employee(
        current=admin,
        username="alice",
        password="secret",
        hourly_rate="20",
        shift_start="09:00",
        shift_end="17:00",
    )

    alice = container.auth_service.authenticate("alice", "secret", "employee")
    container.punch_service.punch_in(alice, now=datetime(2024, 3, 10, 9, 10))
    entry = container.punch_service.punch_out(alice, now=datetime(2024, 3, 10, 17, 30))
    print(entry)

    print(container.payroll_report_service.export_summary_csv(current=admin))


if __name__ == "__main__":
    main()
