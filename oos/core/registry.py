"""
Oracle of Seasons - Patch Registry

Collates every named patch (constant edits, relocated code, treasure records,
item slots, and variable bytes) into one namespace and drives them against a
ROM image.

Application order is the sorted order of patch names, so that the same
configuration always produces the same image and checksum. Some patches are
finalized first from the configuration or from where other patches ended up:
seed data follows the placed seed trees, call sites follow their planted
routines, and relocated slots are written again after everything else.
"""

from ..data import SEASONS, GameTables
from .config import ConfigError, PatchConfig
from .patches import ItemSlot, PatchError, RangePatch, ROMPatch, Treasure
from .patches.treasure import TREASURE_BANK
from .rom_utils import Addr, checksum

OPCODE_CALL = 0xCD

# Seed item ids are 0x20 + seed index
SEED_ITEM_BASE = 0x20


class DuplicatePatchError(ConfigError):
    """Raised when two patch sets register the same name."""

    def __init__(self, name: str, first: str, second: str):
        self.name = name
        self.first = first
        self.second = second
        super().__init__(
            f"duplicate patch name '{name}' (in '{first}' and '{second}')"
        )


class BankOverflowError(PatchError):
    """Raised when planted code doesn't fit in a bank's free space."""

    pass


def collate(subsets: dict[str, dict[str, ROMPatch]]) -> dict[str, ROMPatch]:
    """
    Merge named patch sets into one mapping.

    Args:
        subsets: Subset name -> (patch name -> patch)

    Returns:
        Patch name -> patch, across all subsets

    Raises:
        DuplicatePatchError: If a patch name appears in more than one place
    """
    owners: dict[str, str] = {}
    patches: dict[str, ROMPatch] = {}
    for subset, members in subsets.items():
        for name, patch in members.items():
            if name in owners:
                raise DuplicatePatchError(name, owners[name], subset)
            owners[name] = subset
            patches[name] = patch
    return patches


class EndOfBankAllocator:
    """
    Hands out space for planted routines from each bank's unused tail.

    Allocation is first-fit in request order, so callers must request in a
    stable order to get stable addresses.
    """

    def __init__(self, free_space):
        """
        Args:
            free_space: Mapping of bank -> (start, end) offsets of free space
        """
        self.next_offset = {bank: start for bank, (start, _) in free_space.items()}
        self.end_offset = {bank: end for bank, (_, end) in free_space.items()}

    def remaining(self, bank: int) -> int:
        if bank not in self.next_offset:
            return 0
        return self.end_offset[bank] - self.next_offset[bank]

    def allocate(self, bank: int, size: int) -> Addr:
        """
        Reserve size bytes in bank.

        Returns:
            Address of the reserved space

        Raises:
            BankOverflowError: If the bank has no room left
        """
        if self.remaining(bank) < size:
            raise BankOverflowError(
                f"{size} bytes don't fit in bank 0x{bank:02x} "
                f"({self.remaining(bank)} bytes free)"
            )
        addr = Addr(bank, self.next_offset[bank])
        self.next_offset[bank] += size
        return addr


def _make_treasure(spec) -> Treasure:
    addr = Addr(TREASURE_BANK, spec.offset) if spec.offset else None
    return Treasure(
        spec.item_id, spec.sub_id, addr, spec.mode, spec.param, spec.text, spec.sprite
    )


class PatchRegistry:
    """
    Every patch for one mutate/update/verify cycle.

    Build a new registry for each cycle: patches are stateful (slots write
    collection modes into treasures, variable patches are recomputed) and
    are never reused across images.
    """

    def __init__(
        self,
        tables: GameTables,
        config: PatchConfig,
        treasures: dict[str, Treasure],
        slots: dict[str, ItemSlot],
        fixed: dict[str, RangePatch],
        code: dict[str, RangePatch],
        variable: dict[str, RangePatch],
    ):
        self.tables = tables
        self.config = config
        self.treasures = treasures
        self.slots = slots
        self.fixed = fixed
        self.code = code
        self.variable = variable
        self.subsets = {
            "fixed": fixed,
            "code": code,
            "treasures": treasures,
            "slots": slots,
            "variable": variable,
        }
        self.patches = collate(self.subsets)

    @classmethod
    def build(
        cls, tables: GameTables = SEASONS, config: PatchConfig | None = None
    ) -> "PatchRegistry":
        """
        Create fresh patch objects from the static tables and a configuration.

        Args:
            tables: Static ROM tables
            config: Slot assignments and overrides (default: unmodified game)

        Returns:
            New registry

        Raises:
            DuplicatePatchError: If two patch sets share a name
            ConfigError: If the configuration names unknown slots, treasures,
                or patches, or an override has the wrong length
            BankOverflowError: If planted routines don't fit their banks
        """
        if config is None:
            config = PatchConfig()

        treasures = {name: _make_treasure(spec) for name, spec in tables.treasures.items()}

        slots = {}
        for name, spec in tables.slots.items():
            slots[name] = ItemSlot(
                treasures[spec.treasure],
                list(spec.id_addrs),
                list(spec.sub_id_addrs),
                spec.collect_mode,
                spec.sub_id_offset,
            )

        for slot_name, treasure_name in sorted(config.assignments.items()):
            if slot_name not in slots:
                raise ConfigError(f"unknown slot: '{slot_name}'")
            if treasure_name not in treasures:
                raise ConfigError(f"unknown treasure for '{slot_name}': '{treasure_name}'")
            slots[slot_name].treasure = treasures[treasure_name]

        fixed = {name: RangePatch(*spec) for name, spec in tables.fixed.items()}
        variable = {name: RangePatch(*spec) for name, spec in tables.variable.items()}

        allocator = EndOfBankAllocator(tables.free_space)
        routines = {}
        for name in sorted(tables.routines):
            spec = tables.routines[name]
            addr = allocator.allocate(spec.bank, len(spec.code))
            filler = bytes([tables.free_space_fill] * len(spec.code))
            routines[name] = RangePatch(addr, filler, spec.code)

        hooks = {}
        for name, spec in tables.hooks.items():
            if spec.routine not in routines:
                raise ConfigError(f"hook '{name}' calls unknown routine '{spec.routine}'")
            # a call only reaches bank 0 or the bank it is made from
            routine_bank = routines[spec.routine].addr.bank
            if routine_bank not in (0x00, spec.addr.bank):
                raise ConfigError(
                    f"hook '{name}' in bank 0x{spec.addr.bank:02x} can't call "
                    f"'{spec.routine}' in bank 0x{routine_bank:02x}"
                )
            hooks[name] = RangePatch(spec.addr, spec.expected, spec.expected)

        code = collate({"routines": routines, "hooks": hooks})

        registry = cls(tables, config, treasures, slots, fixed, code, variable)
        registry._validate_overrides()
        return registry

    def ordered_names(self) -> list[str]:
        """Patch names in application order."""
        return sorted(self.patches)

    def _validate_overrides(self):
        for name, data in self.config.overrides.items():
            patch = self.patches.get(name)
            if patch is None:
                raise ConfigError(f"override for unknown patch: '{name}'")
            if not isinstance(patch, RangePatch):
                raise ConfigError(f"override target '{name}' is not a byte range")
            if len(data) != len(patch.replacement):
                raise ConfigError(
                    f"override for '{name}' is {len(data)} bytes, "
                    f"expected {len(patch.replacement)}"
                )

    def _apply_overrides(self):
        for name, data in self.config.overrides.items():
            self.patches[name].replacement[:] = data

    def _seed_tree_id(self, tree: str) -> int:
        item_id = self.slots[tree].treasure.item_id
        if item_id >= len(self.tables.map_icon_by_tree_id):
            raise PatchError(f"'{tree}' holds item id 0x{item_id:02x}, which is not a seed type")
        return item_id

    def set_seed_data(self):
        """
        Set the starting satchel and slingshot seeds (and selections) from
        what grows on the horon village tree, and set each tree's map icon to
        match its seed type.
        """
        seed_index = self.tables.seed_index_by_tree_id[
            self._seed_tree_id(self.tables.horon_tree)
        ]

        for name in self.tables.seed_item_patches:
            self.variable[name].replacement[0] = SEED_ITEM_BASE + seed_index
        for name in self.tables.seed_selection_patches:
            self.variable[name].replacement[1] = seed_index

        for tree in self.tables.seed_trees:
            icon = self.tables.map_icon_by_tree_id[self._seed_tree_id(tree)]
            self.variable[f"{tree} map icon"].replacement[0] = icon

    def resolve_relocations(self):
        """
        Point call sites at their planted routines, and move relocated slot
        ids into those routines.
        """
        for spec_name, spec in self.tables.hooks.items():
            target = self.code[spec.routine].addr.offset
            self.code[spec_name].replacement[0:3] = bytes(
                [OPCODE_CALL, target & 0xFF, (target >> 8) & 0xFF]
            )

        for relocation in self.tables.relocations:
            routine = self.code[relocation.routine].addr
            slot = self.slots[relocation.slot]
            slot.id_addrs[0] = Addr(routine.bank, routine.offset + relocation.id_delta)
            if relocation.sub_id_delta is not None:
                slot.sub_id_addrs[0] = Addr(
                    routine.bank, routine.offset + relocation.sub_id_delta
                )

    def finalize(self):
        """
        Compute every patch whose bytes depend on configuration or on other
        patches. Overrides go last so they win over derived bytes.
        """
        self.set_seed_data()
        self.resolve_relocations()
        self._apply_overrides()

    def mutate(self, buffer: bytearray) -> bytes:
        """
        Apply every patch to the ROM image.

        On error the image is left partly modified and should be discarded.

        Args:
            buffer: Mutable ROM image

        Returns:
            SHA-1 digest of the mutated image

        Raises:
            PatchError: If a patch cannot be applied
        """
        self.finalize()

        for name in self.ordered_names():
            self.patches[name].apply(buffer)

        # relocated ids live inside routines written during the main pass
        for relocation in self.tables.relocations:
            self.slots[relocation.slot].apply(buffer)

        return checksum(buffer)

    def update(self, buffer: bytearray) -> bytes:
        """
        Reapply the constant patches and re-derive seed data from the seed
        trees already in the image, without touching slot placement.

        Args:
            buffer: Mutable ROM image, usually one produced by mutate()

        Returns:
            SHA-1 digest of the updated image

        Raises:
            PatchError: If a patch cannot be applied or a tree holds a non-seed id
        """
        for tree in self.tables.seed_trees:
            slot = self.slots[tree]
            tree_id = buffer[slot.id_addrs[0].full_offset()]
            slot.treasure = Treasure(tree_id, 0x00, None)
        self.set_seed_data()
        self._apply_overrides()

        for name in sorted(self.fixed):
            self.fixed[name].apply(buffer)

        for name in sorted(self.tables.update_variables):
            self.variable[name].apply(buffer)

        return checksum(buffer)

    def find_treasure_name(self, treasure: Treasure) -> str | None:
        """Return the name of this exact Treasure object, or None."""
        for name, candidate in self.treasures.items():
            if candidate is treasure:
                return name
        return None

    def lookup_item_slot(self, treasure_name: str) -> str | None:
        """
        Return the name of the first slot (in name order) holding the named
        treasure. Only meaningful for unique treasures.
        """
        treasure = self.treasures[treasure_name]
        for name in sorted(self.slots):
            if self.slots[name].treasure is treasure:
                return name
        return None

    def unique_treasures(self) -> set[str]:
        """
        Names of treasures that can be slotted freely: those placed in
        exactly one slot, plus the animal flutes, minus the per-dungeon boss
        key aliases.
        """
        counts: dict[str, int] = {}
        for slot in self.slots.values():
            name = self.find_treasure_name(slot.treasure)
            counts[name] = counts.get(name, 0) + 1

        unique = {name for name, count in counts.items() if count == 1}
        unique.update(self.tables.unique_treasures)
        unique.difference_update(self.tables.shared_treasures)
        unique.discard(None)
        return unique

    def treasure_can_be_lost(self, name: str) -> bool:
        """True if the treasure can be lost permanently (outside hide and seek)."""
        return name in self.tables.losable_treasures
