"""
Item slots: places in the game (chests, gifts, dig spots) that hand out a
treasure.

A slot stores the item id and sub id of its treasure at one or more places in
the ROM, and decides how the treasure is delivered. Applying a slot writes
those ids, copies the slot's collection mode into the shared Treasure, and
then writes the Treasure record itself.
"""

from enum import Enum
from types import MappingProxyType

from ..rom_utils import Addr
from .base import (
    MISMATCH_COLLECT_MODE,
    MISMATCH_ITEM_ID,
    MISMATCH_SUB_ID,
    Mismatch,
    ROMPatch,
    write_bytes,
)
from .treasure import Treasure

ROD_ITEM_ID = 0x07


class SubIdPolicy(Enum):
    """How a slot with a non-zero sub id offset encodes a treasure's sub id."""

    BIASED = "biased"  # sub id + slot offset
    LITERAL_ITEM_ID = "literal item id"  # the item id itself


# The rod's sub id byte doubles as an obtained-season flag, so biasing it
# would hand out a season. Write the rod's item id there instead.
SUB_ID_POLICIES = MappingProxyType({
    ROD_ITEM_ID: SubIdPolicy.LITERAL_ITEM_ID,
})


def encode_sub_id(
    treasure: Treasure,
    sub_id_offset: int,
    policies=SUB_ID_POLICIES,
) -> int:
    """
    Return the sub id byte a slot writes for the given treasure.

    Args:
        treasure: Treasure placed in the slot
        sub_id_offset: Slot's sub id bias
        policies: Mapping of item id to SubIdPolicy; unlisted ids are biased

    Returns:
        Byte value for every sub id address of the slot
    """
    if sub_id_offset == 0:
        return treasure.sub_id
    policy = policies.get(treasure.item_id, SubIdPolicy.BIASED)
    if policy is SubIdPolicy.LITERAL_ITEM_ID:
        return treasure.item_id
    return (treasure.sub_id + sub_id_offset) & 0xFF


class ItemSlot(ROMPatch):
    """
    A place in the game that gives a treasure.

    The slot does not own its treasure: the registry owns every Treasure and
    several slots or names may refer to the same one.
    """

    def __init__(
        self,
        treasure: Treasure,
        id_addrs: list[Addr],
        sub_id_addrs: list[Addr] | None = None,
        collect_mode: int = 0,
        sub_id_offset: int = 0,
        policies=SUB_ID_POLICIES,
    ):
        """
        Create an item slot.

        Args:
            treasure: Treasure currently placed in the slot
            id_addrs: Locations of the item id byte
            sub_id_addrs: Locations of the sub id byte; empty when the slot
                encodes no sub id (e.g. a buried collectible)
            collect_mode: Collection mode the slot imposes on its treasure
            sub_id_offset: Bias added to the sub id when it is written
            policies: Sub id encoding policy table
        """
        self.treasure = treasure
        self.id_addrs = list(id_addrs)
        self.sub_id_addrs = list(sub_id_addrs or [])
        self.collect_mode = collect_mode
        self.sub_id_offset = sub_id_offset
        self.policies = policies

    def encoded_sub_id(self) -> int:
        return encode_sub_id(self.treasure, self.sub_id_offset, self.policies)

    def apply(self, buffer: bytearray) -> None:
        for addr in self.id_addrs:
            write_bytes(buffer, addr.full_offset(), bytes([self.treasure.item_id]))
        sub_id = self.encoded_sub_id()
        for addr in self.sub_id_addrs:
            write_bytes(buffer, addr.full_offset(), bytes([sub_id]))
        self.treasure.mode = self.collect_mode
        self.treasure.apply(buffer)

    def check(self, buffer: bytes) -> Mismatch | None:
        for addr in self.id_addrs:
            offset = addr.full_offset()
            if buffer[offset] != self.treasure.item_id:
                return Mismatch(
                    MISMATCH_ITEM_ID,
                    offset,
                    bytes([self.treasure.item_id]),
                    bytes([buffer[offset]]),
                )
        sub_id = self.encoded_sub_id()
        for addr in self.sub_id_addrs:
            offset = addr.full_offset()
            if buffer[offset] != sub_id:
                return Mismatch(
                    MISMATCH_SUB_ID, offset, bytes([sub_id]), bytes([buffer[offset]])
                )
        if self.collect_mode != self.treasure.mode:
            return Mismatch(
                MISMATCH_COLLECT_MODE,
                None,
                bytes([self.collect_mode]),
                bytes([self.treasure.mode]),
            )
        return None

    def spans(self) -> list[tuple[int, int]]:
        spans = [(addr.full_offset(), 1) for addr in self.id_addrs + self.sub_id_addrs]
        return spans + self.treasure.spans()

    def __repr__(self) -> str:
        return (
            f"ItemSlot(treasure={self.treasure!r}, id_addrs={self.id_addrs!r}, "
            f"sub_id_addrs={self.sub_id_addrs!r}, collect_mode=0x{self.collect_mode:02x}, "
            f"sub_id_offset={self.sub_id_offset})"
        )
