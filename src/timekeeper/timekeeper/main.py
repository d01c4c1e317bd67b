from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .accounts.controller import register as register_accounts
from .common.web import register_error_handlers
from .container import build_backend, build_container
from .core.constants import DEFAULT_ADMIN_PASSWORD
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .logging_config import setup_logging
from .payroll.controller import register as register_payroll
from .punches.controller import register as register_punches
from .storage.backend import BlobBackend
from .storage.defaults import ensure_defaults

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, *, backend: Optional[BlobBackend] = None) -> Flask:
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    store_backend = getattr(settings, "STORE_BACKEND", "memory")
    db_config = getattr(settings, "DB_CONFIG", None)
    if backend is None:
        if store_backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            conn = DatabaseConnection(DBConfig.from_dict(db_config))
            apply_schema(conn)
            logger.info("Schema ready (tables=%d)", len(list_tables(conn)))
        backend = build_backend(store_backend=store_backend, db_config=db_config)

    container = build_container(backend=backend)
    ensure_defaults(
        container.store,
        admin_password=getattr(settings, "DEFAULT_ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD),
    )
    app.extensions["timekeeper"] = container

    logger.info("Timekeeper started (settings=%s, store=%s)", settings_module, store_backend)

    register_error_handlers(app)
    register_accounts(app, container)
    register_punches(app, container)
    register_payroll(app, container)

    return app
