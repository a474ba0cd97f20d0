"""
Relocated code: short routines planted in free bank space, the call sites
that jump to them, and the slots whose id bytes move into them.

Each routine loads an item id and sub id for the give-treasure call:
    ld b, <id>      06 xx
    ld c, <sub id>  0e xx
    ret             c9
"""

from types import MappingProxyType

from ..core.rom_utils import Addr
from .specs import HookSpec, Relocation, RoutineSpec

# Unused space at the end of each bank: bank -> (start, end)
FREE_SPACE = MappingProxyType({
    0x08: (0x7F00, 0x8000),
    0x15: (0x7F00, 0x8000),
})
FREE_SPACE_FILL = 0x00

ROUTINES = MappingProxyType({
    "star ore id func": RoutineSpec(0x08, bytes([0x06, 0x45, 0x0E, 0x00, 0xC9])),
    "hard ore id func": RoutineSpec(0x15, bytes([0x06, 0x52, 0x0E, 0x00, 0xC9])),
})

# The original `ld b, id; ld c, sub id` pairs; the trailing byte becomes a nop
HOOKS = MappingProxyType({
    "star ore id call": HookSpec(
        Addr(0x08, 0x62F3), bytes([0x06, 0x45, 0x0E, 0x00]), "star ore id func",
    ),
    "hard ore id call": HookSpec(
        Addr(0x15, 0x5B83), bytes([0x06, 0x52, 0x0E, 0x00]), "hard ore id func",
    ),
})

RELOCATIONS = (
    Relocation("star ore spot", "star ore id func", 1),
    Relocation("hard ore slot", "hard ore id func", 1, 3),
)
