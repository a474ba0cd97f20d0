"""
Core ROM functionality.

This package contains the banked address model, the patch classes, the
patch registry, verification, and ROM file handling for Oracle of Seasons.

The registry and verifier live in their own modules (oos.core.registry,
oos.core.verifier) since they depend on the static tables in oos.data.
"""

from .rom_utils import BANK_SIZE, Addr, checksum, full_offset
from .patches import ItemSlot, Mismatch, PatchError, RangePatch, ROMPatch, Treasure

__all__ = [
    "BANK_SIZE",
    "Addr",
    "checksum",
    "full_offset",
    "ROMPatch",
    "RangePatch",
    "Treasure",
    "ItemSlot",
    "Mismatch",
    "PatchError",
]
