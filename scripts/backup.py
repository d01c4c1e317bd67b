"""Backup every stored document to a timestamped JSON file.

Reads through the configured store backend, so it works for MySQL and
produces a file that can be inspected or re-imported by hand.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timekeeper.timekeeper.container import build_backend
from src.timekeeper.timekeeper.storage.store import KeyValueStore


def dump_documents(store: KeyValueStore) -> dict:
    return {key: store.get(key) for key in store.keys()}


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = build_backend(
        store_backend=getattr(settings, "STORE_BACKEND", "memory"),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"timekeeper_{ts}.json"

    documents = dump_documents(KeyValueStore(backend))
    out_file.write_text(json.dumps(documents, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(documents)} documents)")


if __name__ == "__main__":
    main()
