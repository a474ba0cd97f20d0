"""Integration tests for mutate, update and verify against full images."""

import random

import pytest

from oos.core.config import PatchConfig
from oos.core.patches import Addr, PatchError, RangePatch
from oos.core.registry import PatchRegistry
from oos.core.rom_utils import checksum
from oos.core.verifier import verify
from oos.data import SEASONS

PLACEMENT = PatchConfig(
    assignments={
        "rod gift": "bracelet",
        "d2 bracelet chest": "rod",
        "star ore spot": "shield L-2",
        "hard ore slot": "sword 2",
        "ember tree": "scent tree seeds",
        "scent tree": "ember tree seeds",
    },
    overrides={"cliff default season": b"\x03"},
)


def byte_at(image, bank, offset) -> int:
    return image[Addr(bank, offset).full_offset()]


class TestMutate:
    """Tests for PatchRegistry.mutate()."""

    def test_returns_checksum_of_image(self, vanilla_image):
        digest = PatchRegistry.build(config=PLACEMENT).mutate(vanilla_image)
        assert digest == checksum(vanilla_image)

    def test_deterministic(self, vanilla_image):
        """Two fresh registries produce byte-identical images."""
        first = bytearray(vanilla_image)
        second = bytearray(vanilla_image)
        assert (
            PatchRegistry.build(config=PLACEMENT).mutate(first)
            == PatchRegistry.build(config=PLACEMENT).mutate(second)
        )
        assert first == second

    def test_independent_of_insertion_order(self, vanilla_image):
        expected = bytearray(vanilla_image)
        PatchRegistry.build(config=PLACEMENT).mutate(expected)

        registry = PatchRegistry.build(config=PLACEMENT)
        items = list(registry.patches.items())
        random.Random(1).shuffle(items)
        registry.patches = dict(items)
        shuffled = bytearray(vanilla_image)
        registry.mutate(shuffled)

        assert shuffled == expected

    def test_fixed_patches(self, vanilla_image):
        PatchRegistry.build().mutate(vanilla_image)
        assert byte_at(vanilla_image, 0x04, 0x61A3) == 0x66
        assert byte_at(vanilla_image, 0x24, 0x5DFE) == 0x04

    def test_override(self, vanilla_image):
        PatchRegistry.build(config=PLACEMENT).mutate(vanilla_image)
        assert byte_at(vanilla_image, 0x01, 0x7E43) == 0x03

    def test_assigned_slots(self, vanilla_image):
        PatchRegistry.build(config=PLACEMENT).mutate(vanilla_image)
        assert byte_at(vanilla_image, 0x15, 0x7511) == 0x16  # bracelet in rod gift
        assert byte_at(vanilla_image, 0x15, 0x5424) == 0x07  # rod in d2 chest
        assert byte_at(vanilla_image, 0x15, 0x5425) == 0x00

    def test_rod_gift_sub_id(self, vanilla_image):
        """The rod gift biases sub ids by one, except for the rod itself."""
        PatchRegistry.build(config=PLACEMENT).mutate(vanilla_image)
        assert byte_at(vanilla_image, 0x15, 0x750F) == 0x01

        config = PatchConfig(assignments={"d0 sword chest": "rod", "rod gift": "sword 1"})
        PatchRegistry.build(config=config).mutate(vanilla_image)
        assert byte_at(vanilla_image, 0x0A, 0x7B88) == 0x07
        assert byte_at(vanilla_image, 0x15, 0x750F) == 0x01

    def test_record_takes_slot_mode(self, vanilla_image):
        """Moving the rod from a chest to a gift changes its record's mode."""
        config = PatchConfig(assignments={"shovel gift": "rod", "rod gift": "shovel"})
        PatchRegistry.build(config=config).mutate(vanilla_image)
        assert byte_at(vanilla_image, 0x15, 0x52F9) == 0x0A
        assert byte_at(vanilla_image, 0x15, 0x517D) == 0x38

    def test_relocated_code(self, vanilla_image):
        PatchRegistry.build(config=PLACEMENT).mutate(vanilla_image)

        star_func = Addr(0x08, 0x7F00).full_offset()
        hard_func = Addr(0x15, 0x7F00).full_offset()
        # ld b, id; ld c, sub id; ret
        assert vanilla_image[star_func : star_func + 5] == b"\x06\x01\x0e\x00\xc9"
        assert vanilla_image[hard_func : hard_func + 5] == b"\x06\x05\x0e\x01\xc9"

        star_call = Addr(0x08, 0x62F3).full_offset()
        hard_call = Addr(0x15, 0x5B83).full_offset()
        assert vanilla_image[star_call : star_call + 4] == b"\xcd\x00\x7f\x00"
        assert vanilla_image[hard_call : hard_call + 4] == b"\xcd\x00\x7f\x00"

        # the second star ore id stays where it was
        assert byte_at(vanilla_image, 0x08, 0x62FE) == 0x01

    def test_seed_data(self, vanilla_image):
        PatchRegistry.build(config=PLACEMENT).mutate(vanilla_image)
        assert byte_at(vanilla_image, 0x3F, 0x453B) == 0x21
        assert byte_at(vanilla_image, 0x3F, 0x4544) == 0x21
        assert byte_at(vanilla_image, 0x10, 0x4B19) == 0x21
        assert byte_at(vanilla_image, 0x07, 0x418F) == 0x01
        assert byte_at(vanilla_image, 0x07, 0x419B) == 0x01
        assert byte_at(vanilla_image, 0x02, 0x6CC2) == 0x16  # ember tree icon
        assert byte_at(vanilla_image, 0x02, 0x6CB9) == 0x15  # scent tree icon

    def test_override_of_seed_byte(self, vanilla_image):
        """An override is written even where seed data would go."""
        config = PatchConfig(overrides={"satchel initial seeds": b"\x22"})
        PatchRegistry.build(config=config).mutate(vanilla_image)
        assert byte_at(vanilla_image, 0x3F, 0x453B) == 0x22
        assert byte_at(vanilla_image, 0x3F, 0x4544) == 0x20

    def test_non_seed_on_horon_tree(self, vanilla_image):
        config = PatchConfig(assignments={"ember tree": "rod"})
        with pytest.raises(PatchError):
            PatchRegistry.build(config=config).mutate(vanilla_image)

    def test_undersized_image(self):
        with pytest.raises(IndexError):
            PatchRegistry.build().mutate(bytearray(0x8000))

    def test_mutated_image_fails_verify(self, vanilla_image):
        PatchRegistry.build(config=PLACEMENT).mutate(vanilla_image)
        names = {d.name for d in verify(vanilla_image)}
        assert "d2 bracelet chest" in names
        assert "maku gate check" in names


class TestUpdate:
    """Tests for PatchRegistry.update()."""

    def test_update_of_mutated_image_is_stable(self, vanilla_image):
        PatchRegistry.build(config=PLACEMENT).mutate(vanilla_image)
        mutated = bytes(vanilla_image)

        digest = PatchRegistry.build(config=PLACEMENT).update(vanilla_image)

        assert bytes(vanilla_image) == mutated
        assert digest == checksum(mutated)

    def test_rederives_seed_data_from_image(self, vanilla_image):
        """Seed data follows the tree id in the image, not the configuration."""
        vanilla_image[Addr(0x11, 0x64CB).full_offset()] = 0x04  # gale seeds on horon tree

        PatchRegistry.build().update(vanilla_image)

        assert byte_at(vanilla_image, 0x3F, 0x453B) == 0x23
        assert byte_at(vanilla_image, 0x07, 0x418F) == 0x03
        assert byte_at(vanilla_image, 0x02, 0x6CC2) == 0x18

    def test_applies_fixed_patches(self, vanilla_image):
        PatchRegistry.build().update(vanilla_image)
        assert byte_at(vanilla_image, 0x04, 0x61A3) == 0x66

    def test_leaves_slots_alone(self, vanilla_image):
        config = PatchConfig(assignments={"d2 bracelet chest": "rod"})
        PatchRegistry.build(config=config).update(vanilla_image)
        assert byte_at(vanilla_image, 0x15, 0x5424) == 0x16
        assert byte_at(vanilla_image, 0x08, 0x62F3) == 0x06

    def test_override_of_seed_byte(self, vanilla_image):
        config = PatchConfig(overrides={"satchel initial seeds": b"\x22"})
        PatchRegistry.build(config=config).update(vanilla_image)
        assert byte_at(vanilla_image, 0x3F, 0x453B) == 0x22

    def test_non_seed_id_in_tree(self, vanilla_image):
        vanilla_image[Addr(0x11, 0x685C).full_offset()] = 0x07
        with pytest.raises(PatchError, match="scent tree"):
            PatchRegistry.build().update(vanilla_image)


class TestRoundTrip:
    """Every patch passes its own check right after it is applied."""

    def test_apply_then_check(self, zero_image):
        registry = PatchRegistry.build()
        # check() looks for the unmodified bytes, so these fail once applied
        changing = {
            name for name, patch in registry.patches.items()
            if isinstance(patch, RangePatch) and patch.changes_bytes
        }
        assert changing == set(registry.fixed) | set(SEASONS.routines) | {
            "slingshot initial seeds",
            "satchel initial selection",
            "slingshot initial selection",
            "carry seeds in slingshot",
        }

        for name in registry.ordered_names():
            if name in changing:
                continue
            patch = registry.patches[name]
            patch.apply(zero_image)
            assert patch.check(zero_image) is None, name

    def test_changing_patches_fail_check_once_applied(self, vanilla_image):
        registry = PatchRegistry.build()
        for name, patch in registry.patches.items():
            if not (isinstance(patch, RangePatch) and patch.changes_bytes):
                continue
            image = bytearray(vanilla_image)
            assert patch.check(image) is None, name
            patch.apply(image)
            assert patch.check(image) is not None, name

    def test_vanilla_image_verifies(self, vanilla_image):
        assert verify(vanilla_image) == []
