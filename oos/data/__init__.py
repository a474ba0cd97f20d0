"""
Static ROM tables for Oracle of Seasons.

Everything here is immutable. GameTables bundles the tables into the single
value PatchRegistry builds from; SEASONS is the Japanese Seasons data set.
"""

from dataclasses import dataclass
from types import MappingProxyType

from .code import FREE_SPACE, FREE_SPACE_FILL, HOOKS, RELOCATIONS, ROUTINES
from .fixed import FIXED
from .slots import HORON_TREE, MAP_ICON_BY_TREE_ID, SEED_INDEX_BY_TREE_ID, SEED_TREES, SLOTS
from .specs import HookSpec, RangeSpec, Relocation, RoutineSpec, SlotSpec, TreasureSpec
from .treasures import LOSABLE_TREASURES, SHARED_TREASURES, TREASURES, UNIQUE_TREASURES
from .variable import SEED_ITEM_PATCHES, SEED_SELECTION_PATCHES, UPDATE_VARIABLES, VARIABLE

# Patches that fail verification against an unmodified ROM even when the
# tables are correct.
VERIFY_EXCEPTIONS = frozenset({
    # flutes share one record
    "ricky's flute", "moosh's flute", "dimitri's flute", "strange flute",
    # mystical seeds
    "ember tree seeds", "mystery tree seeds", "scent tree seeds",
    "pegasus tree seeds", "gale tree seeds 1", "gale tree seeds 2",
    # progressive items
    "noble sword spot", "d6 boomerang chest", "d8 HSS chest", "d7 cape chest",
    "sword 2", "slingshot 2", "feather 2", "satchel 2",
    # misc.
    "fool's ore", "member's card", "treasure map", "rod gift",
    "rare peach stone", "ribbon", "blaino gift", "star ore spot",
    "hard ore slot", "flippers gift",
    # records whose bytes are shared with chest ids in bank $15
    "moblin ring", "compass", "rusty bell",
})


@dataclass(frozen=True)
class GameTables:
    """All static data the patch registry is built from."""

    treasures: MappingProxyType
    slots: MappingProxyType
    fixed: MappingProxyType
    variable: MappingProxyType
    routines: MappingProxyType
    hooks: MappingProxyType
    relocations: tuple
    free_space: MappingProxyType
    free_space_fill: int
    verify_exceptions: frozenset
    horon_tree: str
    seed_trees: tuple
    seed_index_by_tree_id: tuple
    map_icon_by_tree_id: tuple
    seed_item_patches: tuple
    seed_selection_patches: tuple
    update_variables: tuple
    losable_treasures: frozenset
    unique_treasures: tuple
    shared_treasures: tuple


SEASONS = GameTables(
    treasures=TREASURES,
    slots=SLOTS,
    fixed=FIXED,
    variable=VARIABLE,
    routines=ROUTINES,
    hooks=HOOKS,
    relocations=RELOCATIONS,
    free_space=FREE_SPACE,
    free_space_fill=FREE_SPACE_FILL,
    verify_exceptions=VERIFY_EXCEPTIONS,
    horon_tree=HORON_TREE,
    seed_trees=SEED_TREES,
    seed_index_by_tree_id=SEED_INDEX_BY_TREE_ID,
    map_icon_by_tree_id=MAP_ICON_BY_TREE_ID,
    seed_item_patches=SEED_ITEM_PATCHES,
    seed_selection_patches=SEED_SELECTION_PATCHES,
    update_variables=UPDATE_VARIABLES,
    losable_treasures=LOSABLE_TREASURES,
    unique_treasures=UNIQUE_TREASURES,
    shared_treasures=SHARED_TREASURES,
)

__all__ = [
    "GameTables",
    "SEASONS",
    "VERIFY_EXCEPTIONS",
    "TreasureSpec",
    "SlotSpec",
    "RangeSpec",
    "RoutineSpec",
    "HookSpec",
    "Relocation",
]
