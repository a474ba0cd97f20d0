"""
Oracle of Seasons - ROM Verification

Checks every patch in a registry against a ROM image and reports all
mismatches at once. Used to confirm the static tables describe an unmodified
ROM correctly.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from ..data import SEASONS, GameTables
from .config import PatchConfig
from .patches import Mismatch
from .registry import PatchRegistry


@dataclass(frozen=True)
class Diagnostic:
    """A named patch that failed its check."""

    name: str
    mismatch: Mismatch

    def __str__(self) -> str:
        return f"{self.name}: {self.mismatch}"


class Verifier:
    """
    Replays each patch's check against an image.

    Patches named in the exception list are skipped: they are known to
    differ from an unmodified ROM even when the tables are right (shared
    records, progressive items, alternate encodings).
    """

    def __init__(self, exceptions: Iterable[str] = SEASONS.verify_exceptions):
        self.exceptions = frozenset(exceptions)

    def verify(self, registry: PatchRegistry, buffer: bytes) -> list[Diagnostic]:
        """
        Check every non-excepted patch.

        Args:
            registry: Patches to check
            buffer: ROM image

        Returns:
            Diagnostics sorted by patch name; empty if the image matches
        """
        diagnostics = []
        for name in registry.ordered_names():
            if name in self.exceptions:
                continue
            mismatch = registry.patches[name].check(buffer)
            if mismatch is not None:
                diagnostics.append(Diagnostic(name, mismatch))
        return diagnostics

    def unknown_exceptions(self, registry: PatchRegistry) -> list[str]:
        """Exception names that don't match any patch in the registry."""
        return sorted(self.exceptions - registry.patches.keys())


def verify(
    buffer: bytes,
    tables: GameTables = SEASONS,
    config: PatchConfig | None = None,
) -> list[Diagnostic]:
    """
    Verify an image against a freshly built registry.

    Args:
        buffer: ROM image
        tables: Static ROM tables (supplies the exception list too)
        config: Configuration to build the registry with

    Returns:
        Diagnostics sorted by patch name; empty if the image matches
    """
    registry = PatchRegistry.build(tables, config)
    return Verifier(tables.verify_exceptions).verify(registry, buffer)
