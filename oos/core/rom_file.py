"""
Oracle of Seasons - ROM File

Loads a ROM image into memory for patching and writes it back out.
"""

from pathlib import Path

from .rom_utils import ROM_SIZE, is_seasons, is_us, is_vanilla


class RomFormatError(ValueError):
    """Raised when a file is not an Oracle of Seasons ROM."""

    pass


class RomImage:
    """
    An Oracle of Seasons ROM held in memory as a mutable bytearray.

    The patch registry works directly on `data`.
    """

    def __init__(self, rom_path: str):
        """
        Load a ROM file.

        Args:
            rom_path: Path to a Seasons ROM

        Raises:
            RomFormatError: If the file is not a Seasons ROM of the right size
        """
        with open(rom_path, "rb") as f:
            self.data = bytearray(f.read())

        if len(self.data) != ROM_SIZE:
            raise RomFormatError(
                f"'{rom_path}' is {len(self.data)} bytes, expected {ROM_SIZE}"
            )
        if not is_seasons(self.data):
            raise RomFormatError(f"'{rom_path}' is not an Oracle of Seasons ROM")

        self.path = rom_path
        self.region = "US" if is_us(self.data) else "JP"
        self.vanilla = is_vanilla(self.data)

        status = "vanilla" if self.vanilla else "modified"
        print(f"ROM loaded: {len(self.data) // 1024}KB, {self.region}, {status}")

    def save(self, output_path: str):
        """Write the image to output_path."""
        with open(output_path, "wb") as f:
            f.write(self.data)
        print(f"Wrote modified ROM to: {output_path}")

    @staticmethod
    def default_output_path(rom_path: str) -> str:
        """<rom>.modified.gbc next to the source ROM."""
        path = Path(rom_path)
        return str(path.with_suffix("")) + ".modified" + (path.suffix or ".gbc")
