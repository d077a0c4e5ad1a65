from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterator, List

from .account import Account


class Bank:
    def __init__(self) -> None:
        self._accounts: List[Account] = []
        self._by_id: Dict[int, Account] = {}

    def add_account(self, account: Account) -> None:
        # The bank keeps its own copy; the caller's object is detached from it.
        if account.id in self._by_id:
            raise ValueError(f"Duplicate account id: {account.id}")
        owned = replace(account)
        self._accounts.append(owned)
        self._by_id[owned.id] = owned

    def get(self, account_id: int) -> Account:
        try:
            return self._by_id[account_id]
        except KeyError:
            raise KeyError(f"No account with id {account_id}") from None

    def total_balance(self) -> int:
        return sum(acc.balance for acc in self._accounts)

    def summary(self) -> List[str]:
        return [acc.summary() for acc in self._accounts]

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)
