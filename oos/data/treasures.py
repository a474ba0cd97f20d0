"""
Treasure table data for Oracle of Seasons (Japanese addresses).

Each entry is (item id, sub id, table offset in bank $15, collection mode,
give-treasure parameter, text id, sprite id). An offset of 0 marks a virtual
treasure with no record in the ROM.
"""

from types import MappingProxyType

from .specs import TreasureSpec

TREASURES = MappingProxyType({
    # equip items
    "shop shield L-1": TreasureSpec(0x01, 0x00, 0x52BD, 0x0A, 0x01, 0x1F, 0x13),
    "shield L-2": TreasureSpec(0x01, 0x01, 0x52C1, 0x0A, 0x02, 0x20, 0x14),
    "bombs, 10": TreasureSpec(0x03, 0x00, 0x52C9, 0x38, 0x10, 0x4D, 0x05),
    "sword 1": TreasureSpec(0x05, 0x00, 0x52D9, 0x38, 0x01, 0x1C, 0x10),
    "sword 2": TreasureSpec(0x05, 0x01, 0x52DD, 0x09, 0x01, 0x1C, 0x10),
    "boomerang L-1": TreasureSpec(0x06, 0x00, 0x52F1, 0x0A, 0x01, 0x22, 0x1C),
    "boomerang L-2": TreasureSpec(0x06, 0x01, 0x52F5, 0x38, 0x02, 0x23, 0x1D),
    "rod": TreasureSpec(0x07, 0x00, 0x52F9, 0x38, 0x07, 0x0A, 0x1E),
    "spring": TreasureSpec(0x07, 0x02, 0x5301, 0x09, 0x00, 0x0D, 0x1E),
    "summer": TreasureSpec(0x07, 0x03, 0x5305, 0x09, 0x01, 0x0B, 0x1E),
    "autumn": TreasureSpec(0x07, 0x04, 0x5309, 0x09, 0x02, 0x0C, 0x1E),
    "winter": TreasureSpec(0x07, 0x05, 0x530D, 0x09, 0x03, 0x0A, 0x1E),
    "magnet gloves": TreasureSpec(0x08, 0x00, 0x5149, 0x38, 0x00, 0x30, 0x18),
    "bombchus": TreasureSpec(0x0D, 0x00, 0x531D, 0x0A, 0x10, 0x32, 0x24),
    "moosh's flute": TreasureSpec(0x0E, 0x00, 0x5161, 0x0A, 0x0D, 0x3A, 0x4D),
    "dimitri's flute": TreasureSpec(0x0E, 0x00, 0x5161, 0x0A, 0x0C, 0x39, 0x4C),
    "strange flute": TreasureSpec(0x0E, 0x00, 0x5161, 0x0A, 0x0D, 0x3B, 0x23),
    "ricky's flute": TreasureSpec(0x0E, 0x00, 0x5161, 0x0A, 0x0B, 0x38, 0x4B),
    "slingshot 1": TreasureSpec(0x13, 0x00, 0x5325, 0x38, 0x01, 0x2E, 0x21),
    "slingshot 2": TreasureSpec(0x13, 0x01, 0x5329, 0x38, 0x01, 0x2E, 0x21),
    "shovel": TreasureSpec(0x15, 0x00, 0x517D, 0x0A, 0x00, 0x25, 0x1B),
    "bracelet": TreasureSpec(0x16, 0x00, 0x5181, 0x38, 0x00, 0x26, 0x19),
    "feather 1": TreasureSpec(0x17, 0x00, 0x532D, 0x38, 0x01, 0x27, 0x16),
    "feather 2": TreasureSpec(0x17, 0x01, 0x5331, 0x38, 0x01, 0x27, 0x16),
    "satchel 1": TreasureSpec(0x19, 0x00, 0x52B5, 0x0A, 0x01, 0x2D, 0x20),
    "satchel 2": TreasureSpec(0x19, 0x01, 0x52B9, 0x01, 0x01, 0x2D, 0x20),
    "fool's ore": TreasureSpec(0x1E, 0x00, 0x51A1, 0x00, 0x00, 0x36, 0x4A),

    # non-inventory items
    "rupees, 1": TreasureSpec(0x28, 0x00, 0x5355, 0x38, 0x01, 0x01, 0x28),
    "rupees, 5": TreasureSpec(0x28, 0x01, 0x5359, 0x38, 0x03, 0x02, 0x29),
    "rupees, 10": TreasureSpec(0x28, 0x02, 0x535D, 0x38, 0x04, 0x03, 0x2A),
    "rupees, 20": TreasureSpec(0x28, 0x03, 0x5361, 0x38, 0x05, 0x04, 0x2B),
    "rupees, 30": TreasureSpec(0x28, 0x04, 0x5365, 0x38, 0x07, 0x05, 0x2B),
    "rupees, 50": TreasureSpec(0x28, 0x05, 0x5369, 0x38, 0x0B, 0x06, 0x2C),
    "rupees, 100": TreasureSpec(0x28, 0x06, 0x536D, 0x38, 0x0C, 0x07, 0x2D),
    "heart container": TreasureSpec(0x2A, 0x00, 0x5399, 0x1A, 0x04, 0x16, 0x3B),
    "piece of heart": TreasureSpec(0x2B, 0x01, 0x5391, 0x38, 0x01, 0x17, 0x3A),
    "rare peach stone": TreasureSpec(0x2B, 0x02, 0x5395, 0x02, 0x01, 0x17, 0x4E),

    # rings
    "discovery ring": TreasureSpec(0x2D, 0x04, 0x53C9, 0x38, 0x28, 0x54, 0x0E),
    "moblin ring": TreasureSpec(0x2D, 0x05, 0x53CD, 0x38, 0x2B, 0x54, 0x0E),
    "steadfast ring": TreasureSpec(0x2D, 0x06, 0x53D1, 0x38, 0x10, 0x54, 0x0E),
    "rang ring L-1": TreasureSpec(0x2D, 0x07, 0x53D5, 0x38, 0x0C, 0x54, 0x0E),
    "blast ring": TreasureSpec(0x2D, 0x08, 0x53D9, 0x38, 0x0D, 0x54, 0x0E),
    "octo ring": TreasureSpec(0x2D, 0x09, 0x53DD, 0x38, 0x2A, 0x54, 0x0E),
    "quicksand ring": TreasureSpec(0x2D, 0x0A, 0x53E1, 0x38, 0x23, 0x54, 0x0E),
    "armor ring L-2": TreasureSpec(0x2D, 0x0B, 0x53E5, 0x38, 0x05, 0x54, 0x0E),
    "power ring L-1": TreasureSpec(0x2D, 0x0E, 0x53F1, 0x38, 0x01, 0x54, 0x0E),
    "subrosian ring": TreasureSpec(0x2D, 0x10, 0x53F9, 0x38, 0x2D, 0x54, 0x0E),

    # dungeon items; the per-dungeon boss keys all share one record
    "small key": TreasureSpec(0x30, 0x03, 0x5409, 0x38, 0x01, 0x1A, 0x42),
    "boss key": TreasureSpec(0x31, 0x03, 0x5419, 0x38, 0x00, 0x1B, 0x43),
    "d1 boss key": TreasureSpec(0x31, 0x03, 0x5419, 0x38, 0x00, 0x1B, 0x43),
    "d2 boss key": TreasureSpec(0x31, 0x03, 0x5419, 0x38, 0x00, 0x1B, 0x43),
    "d3 boss key": TreasureSpec(0x31, 0x03, 0x5419, 0x38, 0x00, 0x1B, 0x43),
    "d6 boss key": TreasureSpec(0x31, 0x03, 0x5419, 0x38, 0x00, 0x1B, 0x43),
    "d7 boss key": TreasureSpec(0x31, 0x03, 0x5419, 0x38, 0x00, 0x1B, 0x43),
    "d8 boss key": TreasureSpec(0x31, 0x03, 0x5419, 0x38, 0x00, 0x1B, 0x43),
    "compass": TreasureSpec(0x32, 0x02, 0x5425, 0x68, 0x00, 0x19, 0x41),
    "dungeon map": TreasureSpec(0x33, 0x02, 0x5431, 0x68, 0x00, 0x18, 0x40),

    # collection items
    "ring box L-1": TreasureSpec(0x2C, 0x00, 0x53A5, 0x02, 0x01, 0x57, 0x33),
    "ring box L-2": TreasureSpec(0x2C, 0x01, 0x53A9, 0x02, 0x02, 0x34, 0x34),
    "flippers": TreasureSpec(0x2E, 0x00, 0x51E1, 0x02, 0x00, 0x31, 0x31),
    "gasha seed": TreasureSpec(0x34, 0x01, 0x5341, 0x38, 0x01, 0x4B, 0x0D),
    "gnarled key": TreasureSpec(0x42, 0x00, 0x5465, 0x29, 0x00, 0x42, 0x44),
    "floodgate key": TreasureSpec(0x43, 0x00, 0x5235, 0x09, 0x00, 0x43, 0x45),
    "dragon key": TreasureSpec(0x44, 0x00, 0x5239, 0x09, 0x00, 0x44, 0x46),
    "star ore": TreasureSpec(0x45, 0x00, 0x523D, 0x5A, 0x00, 0x40, 0x57),
    "ribbon": TreasureSpec(0x46, 0x00, 0x5241, 0x0A, 0x00, 0x41, 0x4F),
    "spring banana": TreasureSpec(0x47, 0x00, 0x5245, 0x0A, 0x00, 0x66, 0x54),
    "ricky's gloves": TreasureSpec(0x48, 0x00, 0x5249, 0x09, 0x01, 0x67, 0x55),
    "rusty bell": TreasureSpec(0x4A, 0x00, 0x546D, 0x0A, 0x00, 0x55, 0x5B),
    "treasure map": TreasureSpec(0x4B, 0x00, 0x5255, 0x0A, 0x00, 0x6C, 0x49),
    "round jewel": TreasureSpec(0x4C, 0x00, 0x5259, 0x0A, 0x00, 0x47, 0x36),
    "pyramid jewel": TreasureSpec(0x4D, 0x00, 0x5479, 0x08, 0x00, 0x4A, 0x37),
    "square jewel": TreasureSpec(0x4E, 0x00, 0x5261, 0x38, 0x00, 0x48, 0x38),
    "x-shaped jewel": TreasureSpec(0x4F, 0x00, 0x5265, 0x38, 0x00, 0x49, 0x39),
    "red ore": TreasureSpec(0x50, 0x00, 0x5269, 0x38, 0x00, 0x3F, 0x59),
    "blue ore": TreasureSpec(0x51, 0x00, 0x526D, 0x38, 0x00, 0x3E, 0x58),
    "hard ore": TreasureSpec(0x52, 0x00, 0x5271, 0x0A, 0x00, 0x3D, 0x5A),
    "member's card": TreasureSpec(0x53, 0x00, 0x5275, 0x0A, 0x00, 0x45, 0x48),
    "master's plaque": TreasureSpec(0x54, 0x00, 0x5279, 0x38, 0x00, 0x70, 0x26),

    # not real treasures, just placeholders for the seeds growing on trees
    "ember tree seeds": TreasureSpec(0x00, 0x00, 0),
    "mystery tree seeds": TreasureSpec(0x01, 0x00, 0),
    "scent tree seeds": TreasureSpec(0x02, 0x00, 0),
    "pegasus tree seeds": TreasureSpec(0x03, 0x00, 0),
    "gale tree seeds 1": TreasureSpec(0x04, 0x00, 0),
    "gale tree seeds 2": TreasureSpec(0x05, 0x00, 0),
})

# Treasures the player can lose permanently (outside of hide and seek)
LOSABLE_TREASURES = frozenset({
    "shop shield L-1", "shield L-2", "star ore", "ribbon", "spring banana",
    "ricky's gloves", "round jewel", "pyramid jewel", "square jewel",
    "x-shaped jewel", "red ore", "blue ore", "hard ore",
})

# Always treated as unique even though they share one record
UNIQUE_TREASURES = ("ricky's flute", "dimitri's flute", "moosh's flute")

# Never treated as unique: aliases of the generic boss key
SHARED_TREASURES = (
    "d1 boss key", "d2 boss key", "d3 boss key",
    "d6 boss key", "d7 boss key", "d8 boss key",
)
