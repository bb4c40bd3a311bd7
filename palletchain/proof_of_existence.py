"""The proof-of-existence pallet: accounts claim ownership of content."""

from __future__ import annotations

from typing import Any, Hashable

from palletchain.dispatch import CallablePallet, call
from palletchain.support import DispatchError


class ProofOfExistencePallet(CallablePallet):
    """Maps each claimed piece of content to the account that owns it."""

    def __init__(self) -> None:
        self._claims: dict[Hashable, Any] = {}

    def get_claim(self, claim: Hashable) -> Any | None:
        """Return the owner of ``claim``, or None if it is unclaimed."""
        return self._claims.get(claim)

    @call
    def create_claim(self, caller: Any, claim: Hashable) -> None:
        """Claim ``claim`` for ``caller``; fails if it is already claimed."""
        if claim in self._claims:
            raise DispatchError("this content is already claimed")
        self._claims[claim] = caller

    @call
    def revoke_claim(self, caller: Any, claim: Hashable) -> None:
        """Remove ``claim``; only its owner may do so."""
        if claim not in self._claims:
            raise DispatchError("claim does not exist")
        if self._claims[claim] != caller:
            raise DispatchError("this content is owned by someone else")
        del self._claims[claim]

    def claims(self) -> dict[Any, Any]:
        """Return a copy of all claims, ordered by content."""
        return {claim: self._claims[claim] for claim in sorted(self._claims)}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(claims={self.claims()!r})"