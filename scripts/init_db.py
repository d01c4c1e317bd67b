from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timekeeper.timekeeper.database.bootstrap import apply_schema, list_tables
from src.timekeeper.timekeeper.database.connection import DBConfig, DatabaseConnection
from src.timekeeper.timekeeper.storage.defaults import ensure_defaults
from src.timekeeper.timekeeper.storage.mysql_backend import MySQLBlobBackend
from src.timekeeper.timekeeper.storage.store import KeyValueStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))
    conn = DatabaseConnection(config)

    apply_schema(conn)
    written = ensure_defaults(
        KeyValueStore(MySQLBlobBackend(conn)),
        admin_password=getattr(settings, "DEFAULT_ADMIN_PASSWORD", "admin"),
    )
    tables = list_tables(conn)
    print(
        "OK: Applied schema.sql -> "
        f"{config.user}@{config.host}:{config.port}/{config.database} "
        f"(tables={len(tables)}, defaults written={written or 'none'})"
    )


if __name__ == "__main__":
    main()
