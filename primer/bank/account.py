from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass
class Account:
    id: int
    holder: str
    balance: int = 0

    def deposit(self, amount: int) -> int:
        self.balance += amount
        log.debug("account %s: deposit %s -> %s", self.id, amount, self.balance)
        return self.balance

    def withdraw(self, amount: int) -> int:
        """
        Withdraw `amount` if the balance covers it.
        Otherwise the balance is left alone and a warning is logged;
        nothing is raised.
        """
        if self.balance >= amount:
            self.balance -= amount
            log.debug("account %s: withdraw %s -> %s", self.id, amount, self.balance)
            return self.balance

        log.warning(
            "Cannot withdraw due to insufficient funds (account %s: balance %s, requested %s)",
            self.id,
            self.balance,
            amount,
        )
        return self.balance

    def summary(self) -> str:
        return f"Account {self.id}: Holder: {self.holder}, Balance: {self.balance}"
