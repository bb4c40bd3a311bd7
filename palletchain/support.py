"""Core block, header and extrinsic types shared by the runtime and its pallets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class DispatchError(Exception):
    """Raised when a state transition is rejected, carrying a short message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Header:
    """A minimal block header holding only the block number."""

    block_number: int


@dataclass(frozen=True)
class Extrinsic:
    """An external message: who is calling and which call they make."""

    caller: Any
    call: Any


@dataclass
class Block:
    """A block: a header plus the extrinsics to execute, in order."""

    header: Header
    extrinsics: list[Extrinsic] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.extrinsics = list(self.extrinsics)