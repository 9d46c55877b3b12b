"""Bank account specs - spectaculous in a pytest module.

Run with:

    uv run pytest examples/bank-account

Each test builds one chain. A chain stops at the first statement that does
not hold and pytest reports the `Failure` message (`scenario: reason`).
"""

from __future__ import annotations

import logging

from spectaculous import LoggingSink, describe


class InsufficientFunds(ValueError):
    pass


class Account:
    def __init__(self, balance: int = 0) -> None:
        self.balance = balance

    def deposit(self, amount: int) -> None:
        if amount <= 0:
            raise ValueError("deposit must be positive")
        self.balance += amount

    def withdraw(self, amount: int) -> None:
        if amount > self.balance:
            raise InsufficientFunds(f"balance {self.balance} < {amount}")
        self.balance -= amount


logging.basicConfig(level=logging.INFO)


def test_new_account() -> None:
    (
        describe(Account, sink=LoggingSink())
        .given(supplier=Account)
        .because("a new account is empty")
        .expect(0).from_(lambda account: account.balance)
        .because("nothing can be withdrawn from an empty account")
        .expect(InsufficientFunds).when(lambda account: account.withdraw(1))
    )


def test_deposits() -> None:
    account = Account(10)
    (
        describe("deposits")
        .given(account)
        .then(lambda a: a.deposit(5)).will_succeed()
        .expect(15).from_(lambda a: a.balance)
        .because("negative deposits are rejected")
        .then(lambda a: a.deposit(-1)).will_throw(ValueError)
        .because("the balance is unchanged after a rejected deposit")
        .expect(lambda balance: balance == 15).from_(lambda a: a.balance)
    )


def test_withdrawals() -> None:
    (
        describe("withdrawals")
        .given(Account(20))
        .wait_for(lambda a: a.withdraw(5))
        .expect(15).from_(lambda a: a.balance)
        .then(lambda a: a.withdraw(100)).will_fail()
    )
