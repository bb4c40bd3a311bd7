# palletchain

A small blockchain state machine built from separate *pallets*. It tracks the
block number and the nonce of each account. It moves balances between
accounts, and it lets accounts claim ownership of pieces of content.

It has no dependencies outside the standard library and needs Python 3.10 or
later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The demo command

```
palletchain
```

The same demo runs with `python -m palletchain.app`. The command takes no
options apart from `--help`.

It builds a fresh runtime with `default_runtime()` and gives `alice` a balance
of 100. It then executes three blocks:

1. `alice` sends 30 to `bob` and 20 to `charlie`.
2. `alice` claims `"Hello, world!"`. `bob` tries to claim it too, and that
   call fails.
3. `alice` revokes her claim, and `bob` then claims the content.

Each failed call is reported on standard error, like this:

```
Extrinsic Error
	Block Number: 2
	Extrinsic Number: 1
	Error: this content is already claimed
```

A failed call does not stop its block. When all three blocks are done, the
command prints the `repr` of the runtime.

## Using the library

```python
from palletchain.dispatch import Call
from palletchain.runtime import RuntimeCall, default_runtime
from palletchain.support import Block, Extrinsic, Header

runtime = default_runtime()
runtime.pallet("balances").set_balance("alice", 100)

block = Block(
    header=Header(block_number=1),
    extrinsics=[
        Extrinsic(
            caller="alice",
            call=RuntimeCall("balances", Call("transfer", {"to": "bob", "amount": 30})),
        ),
    ],
)
runtime.execute_block(block)

runtime.pallet("balances").balance("bob")   # 30
runtime.system().nonce("alice")             # 1
```

### Types (`palletchain.support`)

- `Header(block_number)` holds the number of a block.
- `Extrinsic(caller, call)` is one external message.
- `Block(header, extrinsics)` is a header and a list of extrinsics.
- `DispatchError` is raised when a state transition is rejected. Its
  `message` attribute holds the reason.

### The runtime (`palletchain.runtime`)

`Runtime(pallets)` takes a mapping, or an iterable of `(name, pallet)` pairs.
The first entry must be named `system` and hold a `SystemPallet`. Every other
entry must hold a `CallablePallet`, and no name may appear twice. If these
rules are broken, `RuntimeDefinitionError` is raised. `default_runtime()`
builds a runtime with `system`, `balances` (`BalancesPallet`) and
`proof_of_existence` (`ProofOfExistencePallet`).

- `system()` returns the system pallet. `pallet(name)` returns any pallet by
  name, and `pallet_names()` lists the callable pallets in order.
- `dispatch(caller, runtime_call)` sends a `RuntimeCall(pallet, call)` to the
  named pallet. An unknown pallet name raises `DispatchError`.
- `execute_block(block)` first moves the block number on by one. If the
  header's number does not then match, it raises `DispatchError`. Otherwise,
  for each extrinsic in order, it raises the caller's nonce and dispatches
  the call. A `DispatchError` from a call is reported on standard error and
  does not stop the block.

### The pallets

- `SystemPallet` (`palletchain.system`) provides:
  - `block_number()` and `inc_block_number()` for the block number;
  - `inc_nonce(who)` and `nonce(who)` for one account's nonce, which is zero
    if the account has never transacted;
  - `nonces()` for all nonces.
- `BalancesPallet` (`palletchain.balances`) stores balances as unsigned
  128-bit integers.
  - `set_balance(who, amount)` rejects a non-integer with `TypeError` and an
    out-of-range amount with `ValueError`.
  - `balance(who)` returns the balance, which is zero if nothing is stored.
  - `transfer(caller, to, amount)` is a call. It raises
    `DispatchError("Not enough funds.")` or `DispatchError("Overflow")`.
  - `balances()` returns all balances, ordered by account.
- `ProofOfExistencePallet` (`palletchain.proof_of_existence`) maps content
  to its owner.
  - `get_claim(claim)` returns the owner, or `None`.
  - `create_claim(caller, claim)` is a call. It fails with
    `"this content is already claimed"`.
  - `revoke_claim(caller, claim)` is a call. It fails with
    `"claim does not exist"` or `"this content is owned by someone else"`.
  - `claims()` returns all claims, ordered by content.

### Writing a pallet (`palletchain.dispatch`)

Subclass `CallablePallet` and mark methods with `@call`. A call method takes
`self`, then `caller` (or `_caller`), then named parameters without defaults.
Any other signature raises `CallDefinitionError` when the class is defined.

`CallablePallet.calls()` maps each call name to its argument names.
`dispatch(caller, Call(name, args))` runs the call. It raises `DispatchError`
if the name is not a call, or if the argument names do not match.

## What it does not do

Everything lives in memory. There is no storage, networking, consensus,
hashing or signature checking. A caller is whatever value the extrinsic
names. Blocks are built in code; nothing reads them from files or from peers.