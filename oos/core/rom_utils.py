"""
Oracle of Seasons ROM constants and address utilities.

This module provides:
- ROM layout constants (bank size, cartridge size, header locations)
- The banked address model (Addr) and its translation to flat image offsets
- Image identification helpers (game title, region, vanilla digest)

Used by the patch classes, the registry, and the ROM file loader.
"""

import hashlib
from dataclasses import dataclass

# ROM layout constants
BANK_SIZE = 0x4000  # 16KB banks
ROM_SIZE = 0x100000  # 1MB, 64 banks

# ============================================================================
# Cartridge Header
# ============================================================================
TITLE_OFFSET = 0x134
TITLE_SEASONS = b"ZELDA DIN"
REGION_OFFSET = 0x14A  # 0 = Japan, non-zero = overseas

# SHA-1 of the unmodified Japanese image
VANILLA_SHA1 = bytes.fromhex("ba1268290fb2b1b70505d2d7b5825fc8a4816a4b")


@dataclass(frozen=True)
class Addr:
    """
    A fully-specified banked address.

    Banks 0 and 1 sit at the start of the image; bank n >= 2 is paged into
    the $4000-$7FFF window, so its data lives at offset + BANK_SIZE * (n - 1).
    """

    bank: int
    offset: int

    def full_offset(self) -> int:
        """Return the flat image offset of this address."""
        return full_offset(self)

    def __repr__(self) -> str:
        return f"Addr(0x{self.bank:02x}, 0x{self.offset:04x})"


def full_offset(addr: Addr) -> int:
    """
    Convert a banked address to a flat image offset.

    Args:
        addr: Bank and in-bank offset

    Returns:
        Absolute offset into the ROM image
    """
    if addr.bank >= 2:
        return BANK_SIZE * (addr.bank - 1) + addr.offset
    return addr.offset


def offset_to_addr(offset: int) -> Addr:
    """
    Convert a flat image offset back to a banked address.

    Offsets below 0x8000 map to banks 0 and 1 directly.

    Args:
        offset: Absolute offset into the ROM image

    Returns:
        Equivalent banked address
    """
    if offset < 2 * BANK_SIZE:
        return Addr(offset // BANK_SIZE, offset)
    bank = offset // BANK_SIZE
    return Addr(bank, BANK_SIZE + offset % BANK_SIZE)


def is_seasons(data: bytes) -> bool:
    """Return True if the image header carries the Seasons title."""
    return bytes(data[TITLE_OFFSET : TITLE_OFFSET + len(TITLE_SEASONS)]) == TITLE_SEASONS


def is_us(data: bytes) -> bool:
    """Return True if the image is an overseas (non-Japanese) release."""
    return data[REGION_OFFSET] != 0


def is_vanilla(data: bytes) -> bool:
    """Return True if the image is byte-identical to the vanilla Japanese ROM."""
    return hashlib.sha1(data).digest() == VANILLA_SHA1


def checksum(data: bytes) -> bytes:
    """
    Compute the whole-image fingerprint.

    Args:
        data: Image bytes

    Returns:
        20-byte SHA-1 digest
    """
    return hashlib.sha1(data).digest()
