"""
Variable patches: bytes recomputed from the current configuration.

Like the item slots, these are (usually) no-ops until the seed data is
derived from the placed seed trees.
"""

from types import MappingProxyType

from ..core.rom_utils import Addr
from .specs import byte, span, word

VARIABLE = MappingProxyType({
    # map pop-up icons for seed trees
    "tarm gale tree map icon": byte(Addr(0x02, 0x6CB3), 0x18, 0x18),
    "sunken gale tree map icon": byte(Addr(0x02, 0x6CB6), 0x18, 0x18),
    "scent tree map icon": byte(Addr(0x02, 0x6CB9), 0x16, 0x16),
    "pegasus tree map icon": byte(Addr(0x02, 0x6CBC), 0x17, 0x17),
    "mystery tree map icon": byte(Addr(0x02, 0x6CBF), 0x19, 0x19),
    "ember tree map icon": byte(Addr(0x02, 0x6CC2), 0x15, 0x15),

    # these scenes use specific item sprites not tied to treasure data
    "wooden sword graphics": span(Addr(0x3F, 0x65F4), [0x60, 0x00, 0x00], [0x60, 0x00, 0x00]),
    "rod graphics": span(Addr(0x3F, 0x6BA3), [0x60, 0x10, 0x21], [0x60, 0x10, 0x21]),
    "noble sword graphics": span(Addr(0x3F, 0x6975), [0x4E, 0x1A, 0x50], [0x4E, 0x1A, 0x50]),
    "master sword graphics": span(Addr(0x3F, 0x6978), [0x4E, 0x1A, 0x40], [0x4E, 0x1A, 0x40]),

    # the satchel and slingshot should contain the type of seeds that grow on
    # the horon village tree.
    "satchel initial seeds": byte(Addr(0x3F, 0x453B), 0x20, 0x20),
    "slingshot initial seeds": byte(Addr(0x3F, 0x4544), 0x46, 0x20),

    # the correct type of seed needs to be selected by default, otherwise the
    # player may be unable to use seeds when they only have one type. this
    # overwrites a couple of unimportant bytes in file initialization.
    "satchel initial selection": word(Addr(0x07, 0x418E), 0xA210, 0xBE00),
    "slingshot initial selection": word(Addr(0x07, 0x419A), 0x2E02, 0xBF00),

    # allow seed collection with only a slingshot, by checking for the
    # initial seed type
    "carry seeds in slingshot": byte(Addr(0x10, 0x4B19), 0x19, 0x20),
})

# Seed item ids written as 0x20 + seed index
SEED_ITEM_PATCHES = (
    "satchel initial seeds", "slingshot initial seeds", "carry seeds in slingshot",
)
# Second byte holds the selected seed index
SEED_SELECTION_PATCHES = ("satchel initial selection", "slingshot initial selection")

# Re-derived from the image by PatchRegistry.update()
UPDATE_VARIABLES = (
    "satchel initial seeds", "slingshot initial seeds",
    "satchel initial selection", "slingshot initial selection",
    "carry seeds in slingshot",
    "ember tree map icon", "scent tree map icon", "mystery tree map icon",
    "pegasus tree map icon", "sunken gale tree map icon", "tarm gale tree map icon",
)
