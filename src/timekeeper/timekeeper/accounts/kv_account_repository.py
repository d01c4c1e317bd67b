from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import ACCOUNTS_KEY
from ..storage.store import KeyValueStore
from .model import Account
from .repository import AccountRepository


class KVAccountRepository(AccountRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def load_accounts(self) -> list[Account]:
        return [Account.from_dict(r) for r in self._store.get(ACCOUNTS_KEY, [])]

    def save_accounts(self, accounts: Sequence[Account]) -> None:
        self._store.set(ACCOUNTS_KEY, [a.to_dict() for a in accounts])

    def get_by_username(self, username: str) -> Optional[Account]:
        for account in self.load_accounts():
            if account.username == username:
                return account
        return None
