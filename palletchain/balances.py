"""The balances pallet: how much each account holds, and transfers between accounts."""

from __future__ import annotations

from typing import Any, Hashable

from palletchain.dispatch import CallablePallet, call
from palletchain.support import DispatchError

MAX_BALANCE = 2**128 - 1


def _check_amount(amount: int) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"balance amount must be an integer, got {amount!r}")
    if not 0 <= amount <= MAX_BALANCE:
        raise ValueError(f"balance amount out of range: {amount}")
    return amount


class BalancesPallet(CallablePallet):
    """Keeps track of the balance of every account as an unsigned 128-bit value."""

    def __init__(self) -> None:
        self._balances: dict[Hashable, int] = {}

    def set_balance(self, who: Hashable, amount: int) -> None:
        """Set the balance of ``who`` to ``amount``."""
        self._balances[who] = _check_amount(amount)

    def balance(self, who: Hashable) -> int:
        """Return the balance of ``who``, zero if nothing is stored."""
        return self._balances.get(who, 0)

    @call
    def transfer(self, caller: Hashable, to: Hashable, amount: int) -> None:
        """Move ``amount`` from ``caller`` to ``to``.

        Raises DispatchError if the caller lacks funds or the receiver would overflow.
        """
        _check_amount(amount)
        caller_balance = self.balance(caller)
        to_balance = self.balance(to)

        new_caller_balance = caller_balance - amount
        if new_caller_balance < 0:
            raise DispatchError("Not enough funds.")
        new_to_balance = to_balance + amount
        if new_to_balance > MAX_BALANCE:
            raise DispatchError("Overflow")

        self._balances[caller] = new_caller_balance
        self._balances[to] = new_to_balance

    def balances(self) -> dict[Any, int]:
        """Return a copy of all stored balances, ordered by account."""
        return {who: self._balances[who] for who in sorted(self._balances)}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(balances={self.balances()!r})"