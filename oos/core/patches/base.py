"""
ROM Patch base classes, exceptions, and mismatch reports.

Provides the foundation for declarative ROM patches that can be applied to a
ROM image and later checked against one.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class PatchError(Exception):
    """Raised when a patch cannot be applied."""

    pass


# Mismatch categories
MISMATCH_BYTES = "bytes"
MISMATCH_ITEM_ID = "item id"
MISMATCH_SUB_ID = "sub id"
MISMATCH_COLLECT_MODE = "collect mode"


@dataclass(frozen=True)
class Mismatch:
    """
    Result of a failed check: the bytes a patch expected and what was found.

    For collect mode mismatches there is no ROM location; offset is None and
    expected/found hold the slot and treasure modes respectively.
    """

    kind: str
    offset: int | None
    expected: bytes
    found: bytes

    def __str__(self) -> str:
        if self.kind == MISMATCH_COLLECT_MODE:
            return (
                f"slot/treasure collect mode mismatch: "
                f"{self.expected.hex()}/{self.found.hex()}"
            )
        return f"expected {self.expected.hex()} at {self.offset:x}; found {self.found.hex()}"


def write_bytes(buffer: bytearray, offset: int, data: bytes) -> None:
    """
    Write data into buffer at offset without growing it.

    Raises:
        IndexError: If the write would run past the end of the buffer
    """
    if offset < 0 or offset + len(data) > len(buffer):
        raise IndexError(
            f"write of {len(data)} bytes at 0x{offset:X} is outside the "
            f"0x{len(buffer):X}-byte image"
        )
    buffer[offset : offset + len(data)] = data


def read_bytes(buffer: bytes, offset: int, length: int) -> bytes:
    """
    Read length bytes from buffer at offset.

    Raises:
        IndexError: If the read would run past the end of the buffer
    """
    if offset < 0 or offset + length > len(buffer):
        raise IndexError(
            f"read of {length} bytes at 0x{offset:X} is outside the "
            f"0x{len(buffer):X}-byte image"
        )
    return bytes(buffer[offset : offset + length])


class ROMPatch(ABC):
    """
    Base class for declarative ROM patches.

    Every patch can write itself into an image and check an image for the
    bytes it expects. The registry drives patches only through this
    interface.
    """

    @abstractmethod
    def apply(self, buffer: bytearray) -> None:
        """
        Write this patch into the ROM image.

        Args:
            buffer: Mutable ROM image

        Raises:
            PatchError: If the patch is internally inconsistent
            IndexError: If the patch addresses lie outside the image
        """
        pass

    @abstractmethod
    def check(self, buffer: bytes) -> Mismatch | None:
        """
        Check the ROM image for the bytes this patch expects.

        Args:
            buffer: ROM image to inspect

        Returns:
            None if the image matches, otherwise the first mismatch found
        """
        pass

    @abstractmethod
    def spans(self) -> list[tuple[int, int]]:
        """
        Return the (offset, length) ranges of the image this patch writes.
        """
        pass
