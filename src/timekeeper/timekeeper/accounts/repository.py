from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Account


class AccountRepository(Protocol):
    """Repository interface for accounts.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def load_accounts(self) -> list[Account]:
        raise NotImplementedError

    def save_accounts(self, accounts: Sequence[Account]) -> None:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Account]:
        raise NotImplementedError
