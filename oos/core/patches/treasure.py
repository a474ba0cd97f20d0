"""
Treasure records: the four-byte data block describing one in-game reward.

Each treasure is identified in game code by an (item id, sub id) pair. The
treasure table in bank $15 holds, for each pair, the collection mode, the
parameter passed to the give-treasure routine, the text id, and the sprite id.
"""

from ..rom_utils import Addr
from .base import MISMATCH_BYTES, Mismatch, ROMPatch, read_bytes, write_bytes

# Collection modes: how a reward is delivered to the player
COLLECT_BUY_SATCHEL = 0x01
COLLECT_RING_BOX = 0x02
COLLECT_UNDERWATER = 0x08
COLLECT_FIND1 = 0x09
COLLECT_FIND2 = 0x0A
COLLECT_APPEAR = 0x1A  # heart containers
COLLECT_FALL = 0x29
COLLECT_CHEST = 0x38  # most items
COLLECT_CHEST_MAP = 0x68  # map and compass
COLLECT_DIG = 0x5A

TREASURE_BANK = 0x15
TREASURE_RECORD_SIZE = 4


class Treasure(ROMPatch):
    """
    A treasure record in the bank $15 treasure table.

    A treasure with no address is virtual: a placeholder (such as the seed
    type growing on a tree) that has ids but no backing record, so apply()
    and check() do nothing. Several names may share the same record; each
    name still gets its own Treasure object.
    """

    def __init__(
        self,
        item_id: int,
        sub_id: int,
        addr: Addr | None,
        mode: int = 0,
        param: int = 0,
        text: int = 0,
        sprite: int = 0,
    ):
        self.item_id = item_id
        self.sub_id = sub_id
        self.addr = addr
        self.mode = mode
        self.param = param
        self.text = text
        self.sprite = sprite

    @property
    def is_virtual(self) -> bool:
        return self.addr is None

    def to_bytes(self) -> bytes:
        """Return the record as it appears in the ROM."""
        return bytes([self.mode, self.param, self.text, self.sprite])

    def apply(self, buffer: bytearray) -> None:
        if self.is_virtual:
            return
        write_bytes(buffer, self.addr.full_offset(), self.to_bytes())

    def check(self, buffer: bytes) -> Mismatch | None:
        if self.is_virtual:
            return None
        start = self.addr.full_offset()
        found = read_bytes(buffer, start, TREASURE_RECORD_SIZE)
        expected = self.to_bytes()
        if found != expected:
            return Mismatch(MISMATCH_BYTES, start, expected, found)
        return None

    def spans(self) -> list[tuple[int, int]]:
        if self.is_virtual:
            return []
        return [(self.addr.full_offset(), TREASURE_RECORD_SIZE)]

    def __repr__(self) -> str:
        return (
            f"Treasure(id=0x{self.item_id:02x}, sub_id=0x{self.sub_id:02x}, "
            f"addr={self.addr!r}, data={self.to_bytes().hex()})"
        )
