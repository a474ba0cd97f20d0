#!/usr/bin/env python3
"""
Oracle of Seasons - ROM Patcher

Commits a slot assignment and the fixed edits to a ROM, re-derives seed data
for an already patched ROM, checks a ROM against the patch tables, or shows
which patches changed which bytes.
"""

import argparse
import json
import sys

from oos.core.config import ConfigError, PatchConfig
from oos.core.patches import PatchError
from oos.core.registry import PatchRegistry
from oos.core.rom_diff import attribute_runs, changed_runs
from oos.core.rom_file import RomFormatError, RomImage
from oos.core.verifier import Verifier


def load_config(path: str | None) -> PatchConfig:
    if path is None:
        return PatchConfig()
    return PatchConfig.load(path)


def cmd_mutate(args) -> int:
    rom = RomImage(args.rom_file)
    registry = PatchRegistry.build(config=load_config(args.config))
    digest = registry.mutate(rom.data)
    print(f"Checksum: {digest.hex()}")
    if not args.dry_run:
        rom.save(args.output or RomImage.default_output_path(args.rom_file))
    return 0


def cmd_update(args) -> int:
    rom = RomImage(args.rom_file)
    registry = PatchRegistry.build(config=load_config(args.config))
    digest = registry.update(rom.data)
    print(f"Checksum: {digest.hex()}")
    if not args.dry_run:
        rom.save(args.output or RomImage.default_output_path(args.rom_file))
    return 0


def cmd_verify(args) -> int:
    rom = RomImage(args.rom_file)
    registry = PatchRegistry.build(config=load_config(args.config))
    verifier = Verifier(registry.tables.verify_exceptions)

    for name in verifier.unknown_exceptions(registry):
        print(f"Warning: verify exception '{name}' matches no patch")

    diagnostics = verifier.verify(registry, rom.data)
    for diagnostic in diagnostics:
        print(diagnostic)

    if diagnostics:
        print(f"{len(diagnostics)} mismatch(es)")
        return 1
    print("ROM matches all patch tables")
    return 0


def cmd_diff(args) -> int:
    before = RomImage(args.before)
    after = RomImage(args.after)
    registry = PatchRegistry.build(config=load_config(args.config))
    registry.finalize()

    unowned = 0
    for run, names in attribute_runs(changed_runs(before.data, after.data), registry):
        owner = ", ".join(names) if names else "(no patch)"
        print(f"{run}  [{owner}]")
        if not names:
            unowned += 1

    if unowned:
        print(f"{unowned} changed run(s) not written by any patch")
        return 1
    return 0


def cmd_list(args) -> int:
    registry = PatchRegistry.build()
    for subset, members in registry.subsets.items():
        print(f"{subset} ({len(members)}):")
        for name in sorted(members):
            print(f"  {name}")
        print()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Patch and verify Oracle of Seasons ROMs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Apply a slot assignment
  python tools/patch_rom.py mutate rom.gbc -c placement.json -o seed.gbc

  # Re-derive seed data for an already patched ROM
  python tools/patch_rom.py update seed.gbc -o seed.gbc

  # Check the tables against an unmodified ROM
  python tools/patch_rom.py verify rom.gbc

  # Show which patches changed which bytes
  python tools/patch_rom.py diff rom.gbc seed.gbc -c placement.json
""",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, func, help_text in [
        ("mutate", cmd_mutate, "Apply all patches for a slot assignment"),
        ("update", cmd_update, "Reapply fixed patches and re-derive seed data"),
    ]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("rom_file", help="Source ROM file")
        sub.add_argument("-c", "--config", help="Placement config JSON file")
        sub.add_argument(
            "-o", "--output", help="Output ROM file (default: <rom>.modified.gbc)"
        )
        sub.add_argument(
            "-n", "--dry-run", action="store_true", help="Don't write the output ROM"
        )
        sub.set_defaults(func=func)

    sub = subparsers.add_parser("verify", help="Check a ROM against the patch tables")
    sub.add_argument("rom_file", help="ROM file to check")
    sub.add_argument("-c", "--config", help="Placement config JSON file")
    sub.set_defaults(func=cmd_verify)

    sub = subparsers.add_parser("diff", help="Attribute changed bytes to patches")
    sub.add_argument("before", help="Original ROM file")
    sub.add_argument("after", help="Patched ROM file")
    sub.add_argument("-c", "--config", help="Placement config JSON file used for the patch")
    sub.set_defaults(func=cmd_diff)

    sub = subparsers.add_parser("list", help="List patch names by set")
    sub.set_defaults(func=cmd_list)

    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except PatchError as e:
        print(f"Patch error: {e}")
        return 1
    except (ConfigError, RomFormatError) as e:
        print(f"Error: {e}")
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: invalid config file: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
