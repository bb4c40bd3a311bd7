"""Demonstration chain: funds a few accounts, moves balances and claims content."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from palletchain.dispatch import Call
from palletchain.runtime import Runtime, RuntimeCall, default_runtime
from palletchain.support import Block, DispatchError, Extrinsic, Header

ALICE = "alice"
BOB = "bob"
CHARLIE = "charlie"
GENESIS_BALANCE = 100
CLAIM = "Hello, world!"


def _transfer(caller: str, to: str, amount: int) -> Extrinsic:
    return Extrinsic(
        caller=caller,
        call=RuntimeCall("balances", Call("transfer", {"to": to, "amount": amount})),
    )


def _claim_call(caller: str, name: str, claim: str) -> Extrinsic:
    return Extrinsic(
        caller=caller,
        call=RuntimeCall("proof_of_existence", Call(name, {"claim": claim})),
    )


def build_demo_blocks() -> list[Block]:
    """Return the three demonstration blocks, numbered from 1."""
    return [
        Block(
            header=Header(block_number=1),
            extrinsics=[
                _transfer(ALICE, BOB, 30),
                _transfer(ALICE, CHARLIE, 20),
            ],
        ),
        Block(
            header=Header(block_number=2),
            extrinsics=[
                _claim_call(ALICE, "create_claim", CLAIM),
                _claim_call(BOB, "create_claim", CLAIM),
            ],
        ),
        Block(
            header=Header(block_number=3),
            extrinsics=[
                _claim_call(ALICE, "revoke_claim", CLAIM),
                _claim_call(BOB, "create_claim", CLAIM),
            ],
        ),
    ]


def run_demo() -> Runtime:
    """Fund alice, execute the demonstration blocks and return the runtime.

    Raises RuntimeError if a block as a whole is rejected.
    """
    runtime = default_runtime()
    runtime.pallet("balances").set_balance(ALICE, GENESIS_BALANCE)
    for block in build_demo_blocks():
        try:
            runtime.execute_block(block)
        except DispatchError as error:
            raise RuntimeError(
                f"Block {block.header.block_number} execution failed: {error.message}"
            ) from error
    return runtime


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print the final state of the runtime."""
    parser = argparse.ArgumentParser(
        prog="palletchain",
        description="Execute a few demonstration blocks and print the resulting state.",
    )
    parser.parse_args(argv)
    runtime = run_demo()
    print(repr(runtime))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())