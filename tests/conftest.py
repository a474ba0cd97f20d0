"""Shared pytest fixtures for ROM patch tests."""

import pytest

from oos.core.patches import RangePatch
from oos.core.registry import PatchRegistry
from oos.core.rom_utils import ROM_SIZE, TITLE_OFFSET, TITLE_SEASONS


def create_vanilla_image() -> bytearray:
    """
    Create a ROM image holding the bytes every patch expects to find.

    The image is zero-filled apart from:
    - The Seasons title in the cartridge header
    - Each treasure record as listed in the tables
    - Each slot's vanilla item id and sub id bytes, which win over the
      records they share bytes with
    - The expected bytes of every byte range patch
    """
    data = bytearray(ROM_SIZE)
    data[TITLE_OFFSET : TITLE_OFFSET + len(TITLE_SEASONS)] = TITLE_SEASONS

    registry = PatchRegistry.build()
    for name in sorted(registry.treasures):
        registry.treasures[name].apply(data)

    # only the id bytes: applying a slot would rewrite its record
    for slot in registry.slots.values():
        for addr in slot.id_addrs:
            data[addr.full_offset()] = slot.treasure.item_id
        for addr in slot.sub_id_addrs:
            data[addr.full_offset()] = slot.encoded_sub_id()

    for patch in registry.patches.values():
        if isinstance(patch, RangePatch):
            offset = patch.addr.full_offset()
            data[offset : offset + len(patch.expected)] = patch.expected

    return data


@pytest.fixture
def zero_image():
    """A zero-filled image the size of the cartridge."""
    return bytearray(ROM_SIZE)


@pytest.fixture
def vanilla_image():
    """An image that verifies cleanly against the default tables."""
    return create_vanilla_image()


@pytest.fixture
def registry():
    """A freshly built registry with the default configuration."""
    return PatchRegistry.build()


@pytest.fixture
def rom_path(tmp_path, vanilla_image):
    """A vanilla image written to a temporary .gbc file."""
    path = tmp_path / "seasons.gbc"
    path.write_bytes(vanilla_image)
    return path
