# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from debug import Debug
from enigma import Enigma
from errors import ConfigurationError
from utilities import (
    get_plugboard,
    get_positions,
    get_ring_settings,
    get_rotor_selection,
    group_blocks,
    load_settings,
    parse_numbers,
    parse_pairs,
    parse_rotors,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


@dataclass(slots=True)
class Config:
    """Runtime switches that influence how results are shown."""

    block: int = 0                  # output group size, 0 keeps spacing


# ────────────────────────────────────────────────────────────────────────
#  1. Settings collection
# ────────────────────────────────────────────────────────────────────────


def collect_settings(args: argparse.Namespace) -> Dict:
    """Merge a JSON file, command-line flags and prompts (in that order)."""
    settings: Dict = {}
    if args.config:
        settings.update(load_settings(Path(args.config)))

    if args.rotors is not None:
        settings["rotors"] = parse_rotors(args.rotors)
    if args.positions is not None:
        settings["positions"] = parse_numbers(args.positions)
    if args.rings is not None:
        settings["rings"] = parse_numbers(args.rings)
    if args.plugs is not None:
        settings["plugs"] = parse_pairs(args.plugs)

    # anything still missing is asked for
    if "rotors" not in settings:
        settings["rotors"] = get_rotor_selection()
    if "positions" not in settings:
        settings["positions"] = get_positions()
    if "rings" not in settings:
        settings["rings"] = get_ring_settings()
    if "plugs" not in settings:
        settings["plugs"] = get_plugboard()
    return settings


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a 3-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to process. If omitted, an interactive REPL starts.")
    p.add_argument("--rotors", metavar="'I II III'", help="Three rotors, left to right, by name or index.")
    p.add_argument("--positions", metavar="'0 0 0'", help="Three start positions 0-25.")
    p.add_argument("--rings", metavar="'0 0 0'", help="Three ring settings 0-25.")
    p.add_argument("--plugs", metavar="'AB CD'", help="Plugboard pairs. Pass '' for none.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON; flags override it.")
    p.add_argument("--block", type=int, default=0, help="Print output in groups of N letters. Default: 0 (off)")
    p.add_argument("--debug", metavar="COMPONENTS", help="Comma-separated components to log, e.g. stepping,plugboard")
    return p.parse_args(argv)


def build_machine(settings: Dict) -> Enigma:
    try:
        return Enigma.from_settings(settings)
    except ConfigurationError as e:
        sys.exit(f"Failed to build machine: {e}")


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)

    if args.debug:
        try:
            debug.enable(*(c.strip() for c in args.debug.split(",") if c.strip()))
        except ValueError as e:
            sys.exit(str(e))

    try:
        settings = collect_settings(args)
    except ConfigurationError as e:
        sys.exit(f"Failed to load settings: {e}")

    cfg = Config(block=args.block)

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        machine = build_machine(settings)
        print(group_blocks(machine.process(args.message), cfg.block))
        return

    # interactive REPL ---------------------------------------------------
    machine = build_machine(settings)
    print(f"\nLoaded {machine!r}.")
    print("Every line starts from the same rotor positions. Blank line to quit.\n")
    while True:
        txt = input("\nMessage: ")
        if not txt.strip():
            break
        # fresh machine per line so the receiver can use the same key
        machine = build_machine(settings)
        print("\nResult:", group_blocks(machine.process(txt), cfg.block))


if __name__ == "__main__":
    main()
