"""
Constant patches: edits that are the same for every seed.
"""

from types import MappingProxyType

from ..core.rom_utils import Addr
from .specs import byte, span, word

FIXED = MappingProxyType({
    # have maku gate open from start
    "maku gate check": byte(Addr(0x04, 0x61A3), 0x7E, 0x66),

    # have horon village shop stock *and* sell items from the start, including
    # the flute. also don't disable the flute appearing until actually getting
    # ricky's flute; normally it disappears as soon as you enter the screen
    # northeast of d1 (or ricky's spot, whichever comes first).
    "horon shop stock check": byte(Addr(0x08, 0x4ADB), 0x05, 0x02),
    "horon shop sell check": byte(Addr(0x08, 0x48D0), 0x05, 0x02),
    "horon shop flute check 1": byte(Addr(0x08, 0x4B02), 0xCB, 0xF6),
    "horon shop flute check 2": byte(Addr(0x08, 0x4AFC), 0x6F, 0x7F),

    # subrosian dancing's flute prize is normally disabled by visiting the
    # same areas as the horon shop's flute.
    "dance hall flute check": byte(Addr(0x09, 0x5E21), 0x20, 0x80),

    # initiate all these events without requiring essences
    "ricky spawn check": byte(Addr(0x09, 0x4E68), 0xCB, 0xF6),
    "dimitri essence check": byte(Addr(0x09, 0x4E36), 0xCB, 0xF6),
    "dimitri flipper check": byte(Addr(0x09, 0x4E4C), 0x2E, 0x04),
    "master essence check 1": byte(Addr(0x0A, 0x4BF5), 0x02, 0x00),
    "master essence check 2": byte(Addr(0x0A, 0x4BEA), 0x40, 0x02),
    "master essence check 3": byte(Addr(0x08, 0x5887), 0x40, 0x02),
    "round jewel essence check": byte(Addr(0x0A, 0x4F8B), 0x05, 0x00),
    "pirate essence check": byte(Addr(0x08, 0x6C32), 0x20, 0x00),
    "eruption check 1": byte(Addr(0x08, 0x7C41), 0x07, 0x00),
    "eruption check 2": byte(Addr(0x08, 0x7CD3), 0x07, 0x00),

    # stop rosa from spawning and activate her portal by default. the first is
    # an essence check and the second is an edit to tile replacement data.
    "rosa spawn check": byte(Addr(0x09, 0x678C), 0x40, 0x04),
    "activate rosa portal": span(Addr(0x04, 0x6016), [0x40, 0x33, 0xC5], [0x10, 0x33, 0xE6]),

    # count number of essences, not highest number essence
    "maku seed check 1": byte(Addr(0x09, 0x7D8D), 0xEA, 0x76),
    "maku seed check 2": byte(Addr(0x09, 0x7D8F), 0x30, 0x18),

    # feather game: don't give fools ore, and don't return fools ore
    "get fools ore 1": byte(Addr(0x14, 0x4111), 0xE0, 0xF0),
    "get fools ore 2": byte(Addr(0x14, 0x4112), 0x2E, 0xF0),
    "get fools ore 3": byte(Addr(0x14, 0x4113), 0x5D, 0xF0),

    # there are tables of extra items to "get" and "lose" upon getting an
    # item. remove the "lose fools ore" entry and insert a "get seeds from
    # slingshot" entry.
    "lose fools, get seeds from slingshot 1": byte(Addr(0x3F, 0x4543), 0x00, 0x13),
    "lose fools, get seeds from slingshot 2": span(
        Addr(0x3F, 0x4545),
        [0x45, 0x00, 0x52, 0x50, 0x51, 0x17, 0x1E, 0x00],
        [0x20, 0x00, 0x46, 0x45, 0x00, 0x52, 0x50, 0x51],
    ),
    "lose fools, get seeds from slingshot 3": byte(Addr(0x3F, 0x44CF), 0x44, 0x47),

    # since slingshot doesn't increment seed capacity, set the level-zero
    # capacity of seeds to 20, and move the pointer up by one byte.
    "satchel capacity": span(Addr(0x3F, 0x4617), [0x20, 0x50, 0x99], [0x20, 0x20, 0x50]),
    "satchel capacity pointer": byte(Addr(0x3F, 0x460E), 0x16, 0x17),

    # stop the hero's cave event from giving a second wooden sword to spin
    # slash with
    "wooden sword second item": byte(Addr(0x0A, 0x7BAF), 0x05, 0x10),

    # change the noble sword's animation pointers to match regular items
    "noble sword anim 1": word(Addr(0x14, 0x4C67), 0xE951, 0xA94F),
    "noble sword anim 2": word(Addr(0x14, 0x4E37), 0x8364, 0xDF60),

    # getting the L-2 (or L-3) sword in the lost woods gives two items: the
    # item itself, and one that also makes you spin slash. point the second
    # id at a fake item so one slot doesn't give two items.
    "noble sword second item": byte(Addr(0x0B, 0x641A), 0x05, 0x10),
    "master sword second item": byte(Addr(0x0B, 0x6421), 0x05, 0x10),

    # the cliff from sunken city to woods of winter is a one-way door; default
    # the area to spring so the flower can be used to climb back up.
    "cliff default season": byte(Addr(0x01, 0x7E43), 0x02, 0x00),

    # remove the snow piles in front of the shovel house so shovel isn't
    # required to avoid a softlock there
    "remove snow piles": byte(Addr(0x24, 0x5DFE), 0xD9, 0x04),
})
