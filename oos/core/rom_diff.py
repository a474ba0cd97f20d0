"""
Compare two ROM images and attribute each changed run of bytes to the
patches that write there.

Used to audit a mutation: every run should belong to at least one patch.
"""

from dataclasses import dataclass

import numpy as np

from .registry import PatchRegistry
from .rom_utils import Addr, offset_to_addr


@dataclass
class ByteRun:
    """A contiguous run of changed bytes."""

    start: int
    end: int  # exclusive
    before: bytes
    after: bytes

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def addr(self) -> Addr:
        return offset_to_addr(self.start)

    def __str__(self) -> str:
        return (
            f"0x{self.start:05x} {self.addr!r} ({self.length} bytes): "
            f"{self.before.hex()} -> {self.after.hex()}"
        )


def ranges_overlap(start: int, end: int, other_start: int, other_end: int) -> bool:
    """Check if two half-open ranges overlap."""
    return start < other_end and other_start < end


def changed_runs(before: bytes, after: bytes) -> list[ByteRun]:
    """
    Find every run of bytes that differs between two images.

    Args:
        before: Original image
        after: Modified image of the same size

    Returns:
        Runs in ascending offset order

    Raises:
        ValueError: If the images differ in size
    """
    a = np.frombuffer(bytes(before), dtype=np.uint8)
    b = np.frombuffer(bytes(after), dtype=np.uint8)
    if a.shape != b.shape:
        raise ValueError(f"image sizes differ: {a.size} vs {b.size}")

    changed = np.flatnonzero(a != b)
    if changed.size == 0:
        return []

    # a gap of more than one byte between changed offsets starts a new run
    breaks = np.flatnonzero(np.diff(changed) > 1)
    starts = np.concatenate(([changed[0]], changed[breaks + 1]))
    ends = np.concatenate((changed[breaks], [changed[-1]])) + 1

    return [
        ByteRun(int(s), int(e), bytes(before[s:e]), bytes(after[s:e]))
        for s, e in zip(starts, ends)
    ]


def attribute_runs(
    runs: list[ByteRun], registry: PatchRegistry
) -> list[tuple[ByteRun, list[str]]]:
    """
    Pair each run with the names of the patches whose footprint overlaps it.

    A run with no names was changed by something outside the registry.
    """
    footprints = []
    for name in registry.ordered_names():
        for offset, length in registry.patches[name].spans():
            footprints.append((offset, offset + length, name))

    attributed = []
    for run in runs:
        names = sorted({
            name
            for start, end, name in footprints
            if ranges_overlap(run.start, run.end, start, end)
        })
        attributed.append((run, names))
    return attributed
