"""The system pallet: block number and per-account nonces."""

from __future__ import annotations

from typing import Any, Hashable


class SystemPallet:
    """Low-level chain state: the current block number and account nonces."""

    def __init__(self) -> None:
        self._block_number = 0
        self._nonce: dict[Hashable, int] = {}

    def block_number(self) -> int:
        """Return the current block number."""
        return self._block_number

    def inc_block_number(self) -> None:
        """Advance the block number by one."""
        self._block_number += 1

    def inc_nonce(self, who: Hashable) -> None:
        """Count one more transaction made by ``who``."""
        self._nonce[who] = self._nonce.get(who, 0) + 1

    def nonce(self, who: Hashable) -> int:
        """Return the nonce of ``who``, zero if it has never transacted."""
        return self._nonce.get(who, 0)

    def nonces(self) -> dict[Any, int]:
        """Return a copy of all stored nonces, ordered by account."""
        return {who: self._nonce[who] for who in sorted(self._nonce)}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(block_number={self._block_number!r}, "
            f"nonce={self.nonces()!r})"
        )