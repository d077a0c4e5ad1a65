from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml

from .account import Account
from .bank import Bank

OPS = ("deposit", "withdraw")

# (account_id, requested, balance)
RejectedFn = Callable[[int, int, int], None]

DEFAULT_SCENARIO: Dict[str, Any] = {
    "name": "Alice and Bob",
    "accounts": [
        {
            "id": 1,
            "holder": "Alice",
            "transactions": [{"deposit": 1000}, {"withdraw": 400}],
        },
        {
            "id": 2,
            "holder": "Bob",
            "transactions": [{"deposit": 2000}, {"withdraw": 250}],
        },
    ],
}


@dataclass(frozen=True, slots=True)
class AccountPlan:
    id: int
    holder: str
    transactions: Tuple[Tuple[str, int], ...]


@dataclass(frozen=True, slots=True)
class Scenario:
    name: str
    accounts: Tuple[AccountPlan, ...]

    @classmethod
    def from_yaml(cls, path: str) -> "Scenario":
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Scenario file {path} must contain a mapping")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Scenario":
        name = data.get("name", "Unnamed scenario")
        if name is None:
            raise ValueError("Scenario 'name' must not be empty")
        name = str(name)
        raw_accounts = data.get("accounts") or []
        if not isinstance(raw_accounts, list):
            raise ValueError("Scenario 'accounts' must be a list")

        plans: List[AccountPlan] = []
        seen = set()
        for i, raw in enumerate(raw_accounts):
            plan = _parse_account(i, raw)
            if plan.id in seen:
                raise ValueError(f"Duplicate account id in scenario: {plan.id}")
            seen.add(plan.id)
            plans.append(plan)

        return cls(name=name, accounts=tuple(plans))

    @classmethod
    def default(cls) -> "Scenario":
        return cls.from_dict(DEFAULT_SCENARIO)


def _parse_account(index: int, raw: Any) -> AccountPlan:
    if not isinstance(raw, dict):
        raise ValueError(f"Account entry #{index} must be a mapping")

    acc_id = raw.get("id")
    # bool is an int subclass; reject it explicitly
    if not isinstance(acc_id, int) or isinstance(acc_id, bool):
        raise ValueError(f"Account entry #{index}: id must be an integer, got {acc_id!r}")

    holder = raw.get("holder")
    if not isinstance(holder, str) or not holder.strip():
        raise ValueError(f"Account {acc_id}: holder must be a non-empty string")

    txs: List[Tuple[str, int]] = []
    raw_txs = raw.get("transactions")
    if raw_txs is None:
        raw_txs = []
    if not isinstance(raw_txs, list):
        raise ValueError(f"Account {acc_id}: 'transactions' must be a list")
    for tx in raw_txs:
        if not isinstance(tx, dict) or len(tx) != 1:
            raise ValueError(f"Account {acc_id}: bad transaction {tx!r}")
        (op, amount), = tx.items()
        if op not in OPS:
            raise ValueError(f"Account {acc_id}: unknown operation {op!r}")
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            raise ValueError(f"Account {acc_id}: invalid amount for {op}: {amount!r}")
        txs.append((op, amount))

    return AccountPlan(id=acc_id, holder=holder, transactions=tuple(txs))


def run_scenario(scenario: Scenario, on_rejected: Optional[RejectedFn] = None) -> Bank:
    """
    Apply every plan and hand the accounts to a fresh bank.
    on_rejected is called for each withdrawal the balance could not cover.
    """
    bank = Bank()
    for plan in scenario.accounts:
        account = Account(plan.id, plan.holder)
        for op, amount in plan.transactions:
            if op == "deposit":
                account.deposit(amount)
            else:
                if amount > account.balance and on_rejected is not None:
                    on_rejected(account.id, amount, account.balance)
                account.withdraw(amount)
        bank.add_account(account)
    return bank
