"""The runtime: ties the system pallet to callable pallets and executes blocks."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from palletchain.balances import BalancesPallet
from palletchain.dispatch import Call, CallablePallet
from palletchain.proof_of_existence import ProofOfExistencePallet
from palletchain.support import Block, DispatchError
from palletchain.system import SystemPallet

SYSTEM = "system"


class RuntimeDefinitionError(ValueError):
    """Raised when a runtime is assembled from an invalid set of pallets."""


@dataclass(frozen=True)
class RuntimeCall:
    """A call routed to the pallet named ``pallet``."""

    pallet: str
    call: Call


class Runtime:
    """Holds the pallets of a chain, dispatches calls and executes blocks.

    The first pallet must be the system pallet, named ``system``; it is not
    callable. Every other pallet must be a CallablePallet.
    """

    def __init__(self, pallets: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> None:
        items = list(pallets.items() if isinstance(pallets, Mapping) else pallets)
        if not items:
            raise RuntimeDefinitionError("runtime struct is expected to have fields")
        first_name, system = items[0]
        if first_name != SYSTEM:
            raise RuntimeDefinitionError("first field is expected to be named system")
        if not isinstance(system, SystemPallet):
            raise RuntimeDefinitionError("the system field must hold a SystemPallet")

        self._system = system
        self._pallets: dict[str, CallablePallet] = {}
        for name, pallet in items[1:]:
            if name == SYSTEM or name in self._pallets:
                raise RuntimeDefinitionError(f"duplicate pallet name: {name}")
            if not isinstance(pallet, CallablePallet):
                raise RuntimeDefinitionError(f"pallet {name!r} is not callable")
            self._pallets[name] = pallet

    def system(self) -> SystemPallet:
        """Return the system pallet."""
        return self._system

    def pallet(self, name: str) -> Any:
        """Return the pallet called ``name``; KeyError if there is none."""
        if name == SYSTEM:
            return self._system
        return self._pallets[name]

    def pallet_names(self) -> list[str]:
        """Return the names of the callable pallets, in definition order."""
        return list(self._pallets)

    def dispatch(self, caller: Any, runtime_call: RuntimeCall) -> None:
        """Route ``runtime_call`` to its pallet on behalf of ``caller``."""
        pallet = self._pallets.get(runtime_call.pallet)
        if pallet is None:
            raise DispatchError(f"unknown pallet: {runtime_call.pallet}")
        pallet.dispatch(caller, runtime_call.call)

    def execute_block(self, block: Block) -> None:
        """Execute every extrinsic of ``block``.

        The block number is advanced first and must then equal the header's,
        otherwise DispatchError is raised. A failing extrinsic is reported on
        standard error and does not stop the block.
        """
        self._system.inc_block_number()
        if block.header.block_number != self._system.block_number():
            raise DispatchError("block number does not match what is expected")
        for index, extrinsic in enumerate(block.extrinsics):
            self._system.inc_nonce(extrinsic.caller)
            try:
                self.dispatch(extrinsic.caller, extrinsic.call)
            except DispatchError as error:
                print(
                    "Extrinsic Error\n"
                    f"\tBlock Number: {block.header.block_number}\n"
                    f"\tExtrinsic Number: {index}\n"
                    f"\tError: {error.message}",
                    file=sys.stderr,
                )

    def __repr__(self) -> str:
        fields = [f"system={self._system!r}"]
        fields += [f"{name}={pallet!r}" for name, pallet in self._pallets.items()]
        return f"{type(self).__name__}({', '.join(fields)})"


def default_runtime() -> Runtime:
    """Build a runtime with the system, balances and proof-of-existence pallets."""
    return Runtime(
        {
            SYSTEM: SystemPallet(),
            "balances": BalancesPallet(),
            "proof_of_existence": ProofOfExistencePallet(),
        }
    )