"""
Immutable entry types for the static ROM tables.

The registry turns these into fresh, mutable patch objects on every build.
"""

from typing import NamedTuple

from ..core.rom_utils import Addr


class TreasureSpec(NamedTuple):
    item_id: int
    sub_id: int
    offset: int  # 0 for virtual treasures
    mode: int = 0
    param: int = 0
    text: int = 0
    sprite: int = 0


class SlotSpec(NamedTuple):
    treasure: str
    id_addrs: tuple
    sub_id_addrs: tuple = ()
    collect_mode: int = 0
    sub_id_offset: int = 0


class RangeSpec(NamedTuple):
    addr: Addr
    expected: bytes
    replacement: bytes


class RoutineSpec(NamedTuple):
    """A small routine planted in a bank's free space."""

    bank: int
    code: bytes


class HookSpec(NamedTuple):
    """
    A call site rewritten to jump into a planted routine.

    The first three replacement bytes become `call <routine>`; any remaining
    expected bytes are kept as they are.
    """

    addr: Addr
    expected: bytes
    routine: str


class Relocation(NamedTuple):
    """
    Moves a slot's first id (and optionally sub id) address into a routine.

    The new addresses are the routine's allocated address plus the given
    deltas.
    """

    slot: str
    routine: str
    id_delta: int
    sub_id_delta: int | None = None


def byte(addr: Addr, old: int, new: int) -> RangeSpec:
    return RangeSpec(addr, bytes([old]), bytes([new]))


def word(addr: Addr, old: int, new: int) -> RangeSpec:
    """Two bytes, big-endian."""
    return RangeSpec(
        addr,
        bytes([(old >> 8) & 0xFF, old & 0xFF]),
        bytes([(new >> 8) & 0xFF, new & 0xFF]),
    )


def span(addr: Addr, old: list[int], new: list[int]) -> RangeSpec:
    return RangeSpec(addr, bytes(old), bytes(new))
