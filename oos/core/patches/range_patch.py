"""
RangePatch implementation for simple byte replacement patches.
"""

from ..rom_utils import Addr
from .base import MISMATCH_BYTES, Mismatch, PatchError, ROMPatch, write_bytes


class RangePatch(ROMPatch):
    """
    A patch that replaces a run of bytes starting at a banked address.

    This is the simplest form of ROM patch. The expected bytes describe what
    an unmodified ROM holds at the location; the replacement bytes are what
    apply() writes. Replacement bytes may be edited in place (or the address
    relocated) before apply() runs, as long as the length is unchanged.
    """

    def __init__(self, addr: Addr, expected: bytes, replacement: bytes):
        """
        Create a byte range patch.

        Args:
            addr: Banked address of the first byte
            expected: Bytes an unmodified ROM holds at this location
            replacement: Bytes to write when applying the patch

        Raises:
            PatchError: If expected and replacement differ in length
        """
        if len(expected) != len(replacement):
            raise PatchError(
                f"range at {addr!r}: expected {len(expected)} bytes, "
                f"replacement has {len(replacement)}"
            )
        self.addr = addr
        self.expected = bytes(expected)
        self.replacement = bytearray(replacement)

    @classmethod
    def byte(cls, addr: Addr, old: int, new: int) -> "RangePatch":
        """Create a single-byte patch."""
        return cls(addr, bytes([old]), bytes([new]))

    @classmethod
    def word(cls, addr: Addr, old: int, new: int) -> "RangePatch":
        """Create a two-byte patch holding big-endian 16-bit values."""
        return cls(
            addr,
            bytes([(old >> 8) & 0xFF, old & 0xFF]),
            bytes([(new >> 8) & 0xFF, new & 0xFF]),
        )

    @property
    def changes_bytes(self) -> bool:
        """True if applying this patch alters an unmodified ROM."""
        return self.expected != bytes(self.replacement)

    def apply(self, buffer: bytearray) -> None:
        """
        Write the replacement bytes.

        Raises:
            PatchError: If the replacement was resized after construction
        """
        if len(self.replacement) != len(self.expected):
            raise PatchError(
                f"range at {self.addr!r}: replacement resized to "
                f"{len(self.replacement)} bytes, expected {len(self.expected)}"
            )
        write_bytes(buffer, self.addr.full_offset(), bytes(self.replacement))

    def check(self, buffer: bytes) -> Mismatch | None:
        """Compare the image against the expected bytes, reporting the first difference."""
        start = self.addr.full_offset()
        for i, value in enumerate(self.expected):
            found = buffer[start + i]
            if found != value:
                return Mismatch(MISMATCH_BYTES, start + i, bytes([value]), bytes([found]))
        return None

    def spans(self) -> list[tuple[int, int]]:
        return [(self.addr.full_offset(), len(self.replacement))]

    def __repr__(self) -> str:
        return (
            f"RangePatch(addr={self.addr!r}, expected={self.expected.hex().upper()}, "
            f"replacement={bytes(self.replacement).hex().upper()})"
        )
