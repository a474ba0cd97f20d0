"""
Oracle of Seasons - Patch Configuration

The decided configuration handed to the patch registry: which treasure goes
in which slot, plus byte overrides for individual range patches (feature and
default toggles). Handles loading from and saving to JSON files.
"""

import json
from dataclasses import dataclass, field


class ConfigError(ValueError):
    """Raised when a configuration does not fit the ROM tables."""

    pass


@dataclass
class PatchConfig:
    """
    Slot assignments and patch overrides.

    Slots not named in assignments keep the treasure they hold in an
    unmodified game.
    """

    assignments: dict[str, str] = field(default_factory=dict)
    overrides: dict[str, bytes] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "PatchConfig":
        """
        Build a config from parsed JSON.

        Override values are hex strings, e.g. {"cliff default season": "02"}.

        Raises:
            ConfigError: If the data has the wrong shape
        """
        if not isinstance(data, dict):
            raise ConfigError(f"config must be an object, not {type(data).__name__}")

        assignments = data.get("assignments", {})
        overrides = data.get("overrides", {})
        if not isinstance(assignments, dict) or not isinstance(overrides, dict):
            raise ConfigError("'assignments' and 'overrides' must be objects")
        for slot_name, treasure_name in assignments.items():
            if not isinstance(treasure_name, str):
                raise ConfigError(
                    f"assignment '{slot_name}': treasure name must be a string, "
                    f"not {treasure_name!r}"
                )

        parsed = {}
        for name, value in overrides.items():
            try:
                parsed[name] = bytes.fromhex(value)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"override '{name}': invalid hex bytes {value!r}") from e

        return cls(assignments=dict(assignments), overrides=parsed)

    @classmethod
    def load(cls, path: str) -> "PatchConfig":
        """Load a config from a JSON file."""
        with open(path) as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> dict:
        return {
            "assignments": dict(sorted(self.assignments.items())),
            "overrides": {k: v.hex() for k, v in sorted(self.overrides.items())},
        }

    def save(self, path: str):
        """Save the config as JSON."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
            f.write("\n")
