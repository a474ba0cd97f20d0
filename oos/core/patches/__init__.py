"""
ROM Patching System.

This package provides a declarative system for applying patches to Oracle of
Seasons ROM images and checking images against them. Every patch kind
implements the same apply/check interface.

Usage:
    from oos.core.patches import RangePatch, Addr

    patch = RangePatch.byte(Addr(0x04, 0x61a3), 0x7e, 0x66)
    mismatch = patch.check(rom)
    if mismatch is None:
        patch.apply(rom)
"""

from ..rom_utils import Addr
from .base import (
    MISMATCH_BYTES,
    MISMATCH_COLLECT_MODE,
    MISMATCH_ITEM_ID,
    MISMATCH_SUB_ID,
    Mismatch,
    PatchError,
    ROMPatch,
)
from .range_patch import RangePatch
from .slot import ROD_ITEM_ID, SUB_ID_POLICIES, ItemSlot, SubIdPolicy, encode_sub_id
from .treasure import Treasure

__all__ = [
    "Addr",
    "ROMPatch",
    "RangePatch",
    "Treasure",
    "ItemSlot",
    "SubIdPolicy",
    "SUB_ID_POLICIES",
    "ROD_ITEM_ID",
    "encode_sub_id",
    "Mismatch",
    "PatchError",
    "MISMATCH_BYTES",
    "MISMATCH_ITEM_ID",
    "MISMATCH_SUB_ID",
    "MISMATCH_COLLECT_MODE",
]
