"""
Item slot data for Oracle of Seasons (Japanese addresses).

Each slot names the treasure it holds in an unmodified game, where its item
id and sub id bytes live, the collection mode it delivers with, and the bias
added to the sub id when it is written.
"""

from types import MappingProxyType

from ..core.patches.treasure import (
    COLLECT_CHEST,
    COLLECT_DIG,
    COLLECT_FALL,
    COLLECT_FIND1,
    COLLECT_FIND2,
    COLLECT_UNDERWATER,
)
from ..core.rom_utils import Addr
from .specs import SlotSpec

SLOTS = MappingProxyType({
    "d0 sword chest": SlotSpec(
        "sword 1", (Addr(0x0A, 0x7B86),), (Addr(0x0A, 0x7B88),), COLLECT_CHEST, 1,
    ),
    "maku key fall": SlotSpec(
        "gnarled key",
        (Addr(0x15, 0x657D), Addr(0x09, 0x7DFF), Addr(0x09, 0x7DE6)),
        (Addr(0x15, 0x6580), Addr(0x09, 0x7E02)),
        COLLECT_FALL,
    ),
    "boomerang gift": SlotSpec(
        "boomerang L-1", (Addr(0x0B, 0x6648),), (Addr(0x0B, 0x6649),), COLLECT_FIND2,
    ),
    # the data says chest
    "rod gift": SlotSpec(
        "rod", (Addr(0x15, 0x7511),), (Addr(0x15, 0x750F),), COLLECT_CHEST, 1,
    ),
    "shovel gift": SlotSpec(
        "shovel", (Addr(0x0B, 0x6A6E),), (Addr(0x0B, 0x6A6F),), COLLECT_FIND2,
    ),
    # addresses are backwards from a normal slot
    "d1 satchel": SlotSpec(
        "satchel 1", (Addr(0x09, 0x669B),), (Addr(0x09, 0x669A),), COLLECT_FIND2,
    ),
    "d2 bracelet chest": SlotSpec(
        "bracelet", (Addr(0x15, 0x5424),), (Addr(0x15, 0x5425),), COLLECT_CHEST,
    ),
    "blaino gift": SlotSpec(
        "ricky's gloves", (Addr(0x0B, 0x64CE),), (Addr(0x0B, 0x64CF),), COLLECT_FIND1,
    ),
    "floodgate key gift": SlotSpec(
        "floodgate key", (Addr(0x09, 0x626B),), (Addr(0x09, 0x626A),), COLLECT_FIND1,
    ),
    "square jewel chest": SlotSpec(
        "square jewel", (Addr(0x0B, 0x7397),), (Addr(0x0B, 0x739B),), COLLECT_CHEST,
    ),
    "x-shaped jewel chest": SlotSpec(
        "x-shaped jewel", (Addr(0x15, 0x53CD),), (Addr(0x15, 0x53CE),), COLLECT_CHEST,
    ),
    # buried; no sub id is encoded at all
    "star ore spot": SlotSpec(
        "star ore", (Addr(0x08, 0x62F4), Addr(0x08, 0x62FE)), (), COLLECT_DIG,
    ),
    "hard ore slot": SlotSpec(
        "hard ore", (Addr(0x15, 0x5B84),), (Addr(0x15, 0x5B86),), COLLECT_FIND2,
    ),
    "d3 feather chest": SlotSpec(
        "feather 1", (Addr(0x15, 0x5458),), (Addr(0x15, 0x5459),), COLLECT_CHEST,
    ),
    "master's plaque chest": SlotSpec(
        "master's plaque", (Addr(0x15, 0x554D),), (Addr(0x15, 0x554E),), COLLECT_CHEST,
    ),
    "flippers gift": SlotSpec(
        "flippers",
        (Addr(0x0B, 0x7310), Addr(0x0B, 0x72F3)),
        (Addr(0x0B, 0x7311),),
        COLLECT_FIND2,
    ),
    "spring banana tree": SlotSpec(
        "spring banana", (Addr(0x09, 0x66B0),), (Addr(0x09, 0x66AF),), COLLECT_FIND2,
    ),
    "dragon key spot": SlotSpec(
        "dragon key", (Addr(0x09, 0x628D),), (Addr(0x09, 0x628C),), COLLECT_FIND1,
    ),
    "pyramid jewel spot": SlotSpec(
        "pyramid jewel", (Addr(0x0B, 0x7350),), (Addr(0x0B, 0x7351),), COLLECT_UNDERWATER,
    ),
    "d4 slingshot chest": SlotSpec(
        "slingshot 1", (Addr(0x15, 0x5470),), (Addr(0x15, 0x5471),), COLLECT_CHEST,
    ),
    "d5 magnet gloves chest": SlotSpec(
        "magnet gloves", (Addr(0x15, 0x5480),), (Addr(0x15, 0x5481),), COLLECT_CHEST,
    ),
    "round jewel gift": SlotSpec(
        "round jewel", (Addr(0x0B, 0x7334),), (Addr(0x0B, 0x7335),), COLLECT_FIND2,
    ),
    # two cases depending on which sword you enter with
    "noble sword spot": SlotSpec(
        "sword 2",
        (Addr(0x0B, 0x6417), Addr(0x0B, 0x641E)),
        (Addr(0x0B, 0x6418), Addr(0x0B, 0x641F)),
        COLLECT_FIND1,
    ),
    "d6 boomerang chest": SlotSpec(
        "boomerang L-2", (Addr(0x15, 0x54C0),), (Addr(0x15, 0x54C1),), COLLECT_CHEST,
    ),
    "rusty bell spot": SlotSpec(
        "rusty bell", (Addr(0x09, 0x6476),), (Addr(0x09, 0x6475),), COLLECT_FIND2,
    ),
    "d7 cape chest": SlotSpec(
        "feather 2", (Addr(0x15, 0x54E1),), (Addr(0x15, 0x54E2),), COLLECT_CHEST,
    ),
    "d8 HSS chest": SlotSpec(
        "slingshot 2", (Addr(0x15, 0x551D),), (Addr(0x15, 0x551E),), COLLECT_CHEST,
    ),

    # "fake" slots: the seed type growing on each tree
    "ember tree": SlotSpec("ember tree seeds", (Addr(0x11, 0x64CB),)),
    "mystery tree": SlotSpec("mystery tree seeds", (Addr(0x11, 0x67DD),)),
    "scent tree": SlotSpec("scent tree seeds", (Addr(0x11, 0x685C),)),
    "pegasus tree": SlotSpec("pegasus tree seeds", (Addr(0x11, 0x6870),)),
    "sunken gale tree": SlotSpec("gale tree seeds 1", (Addr(0x11, 0x69B0),)),
    "tarm gale tree": SlotSpec("gale tree seeds 2", (Addr(0x11, 0x6A46),)),
})

# The horon village tree decides which seeds the satchel and slingshot start with
HORON_TREE = "ember tree"

SEED_TREES = (
    "ember tree", "mystery tree", "scent tree",
    "pegasus tree", "sunken gale tree", "tarm gale tree",
)

# Indexed by seed tree item id
SEED_INDEX_BY_TREE_ID = (0, 4, 1, 2, 3, 3)
MAP_ICON_BY_TREE_ID = (0x15, 0x19, 0x16, 0x17, 0x18, 0x18)
