from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .accounts.kv_account_repository import KVAccountRepository
from .accounts.service import AccountService, AuthService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.service import PayrollReportService
from .paysettings.kv_pay_settings_repository import KVPaySettingsRepository
from .paysettings.service import PaySettingsService
from .punches.kv_punch_repository import KVLogRepository, KVOpenPunchRepository
from .punches.service import PunchService
from .storage.backend import BlobBackend, MemoryBlobBackend
from .storage.mysql_backend import MySQLBlobBackend
from .storage.store import KeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    accounts_repo: KVAccountRepository
    settings_repo: KVPaySettingsRepository
    logs_repo: KVLogRepository
    open_punches_repo: KVOpenPunchRepository

    auth_service: AuthService
    account_service: AccountService
    pay_settings_service: PaySettingsService
    punch_service: PunchService
    payroll_report_service: PayrollReportService


def build_backend(*, store_backend: str, db_config: Optional[dict] = None) -> BlobBackend:
    if store_backend == "memory":
        return MemoryBlobBackend()
    if store_backend == "mysql":
        if not db_config:
            raise ValueError("STORE_BACKEND=mysql requires DB_CONFIG")
        return MySQLBlobBackend(DatabaseConnection(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown STORE_BACKEND: {store_backend!r}")


def build_container(*, backend: BlobBackend) -> Container:
    store = KeyValueStore(backend)

    accounts_repo = KVAccountRepository(store)
    settings_repo = KVPaySettingsRepository(store)
    logs_repo = KVLogRepository(store)
    open_punches_repo = KVOpenPunchRepository(store)

    return Container(
        store=store,
        accounts_repo=accounts_repo,
        settings_repo=settings_repo,
        logs_repo=logs_repo,
        open_punches_repo=open_punches_repo,
        auth_service=AuthService(accounts_repo),
        account_service=AccountService(accounts_repo, logs_repo, open_punches_repo),
        pay_settings_service=PaySettingsService(settings_repo),
        punch_service=PunchService(accounts_repo, logs_repo, open_punches_repo, settings_repo),
        payroll_report_service=PayrollReportService(logs_repo, accounts_repo),
    )
