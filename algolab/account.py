"""A bank account whose balance can only change through deposits and withdrawals."""

from __future__ import annotations


class Account:
    """An account opened with a zero balance."""

    __slots__ = ("_balance",)

    def __init__(self) -> None:
        self._balance = 0

    @property
    def balance(self) -> int:
        """The current balance."""
        return self._balance

    def deposit(self, amount: int) -> None:
        """Add ``amount`` to the balance; negative amounts are rejected."""
        if amount < 0:
            raise ValueError("invalid amount")
        self._balance += amount

    def withdraw(self, amount: int) -> bool:
        """Take ``amount`` out if the balance covers it; return whether it did."""
        if amount < 0:
            raise ValueError("invalid amount")
        if amount > self._balance:
            return False
        self._balance -= amount
        return True

    def __repr__(self) -> str:
        return f"Account(balance={self._balance})"