# utilities.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Tuple

from alphabet import SIZE
from enigma import ROTOR_COUNT
from errors import ConfigurationError
from plugboard import MAX_PAIRS, normalise_pairs
from rotor_and_reflector import ROTOR_NAMES, ROTORS

# ────────────────────────────────────────────────────────────────────────
#  0. Trivial helpers
# ────────────────────────────────────────────────────────────────────────

REQUIRED_KEYS = {"rotors", "positions", "rings"}


def ask(prompt: str) -> str:
    """Read & normalise an operator’s response (uppercase, trimmed)."""
    return input(prompt).strip().upper()


# ────────────────────────────────────────────────────────────────────────
#  1. Operator input parsing
# ────────────────────────────────────────────────────────────────────────


def parse_numbers(raw: str, count: int = ROTOR_COUNT) -> List[int]:
    """Parse *count* space-separated integers in ``0..25``."""
    items = raw.split()
    if len(items) != count or not all(item.isdecimal() for item in items):
        raise ConfigurationError(f"Need exactly {count} numbers in 0–{SIZE - 1}, got {raw!r}")
    numbers = [int(item) for item in items]
    if any(n >= SIZE for n in numbers):
        raise ConfigurationError(f"Need exactly {count} numbers in 0–{SIZE - 1}, got {raw!r}")
    return numbers


def parse_pairs(raw: str) -> List[Tuple[str, str]]:
    """Parse ``"AB CD EF"`` into validated plug pairs; blank means none."""
    return list(normalise_pairs(raw.upper().split()))


def parse_rotors(raw: str | List) -> List[int]:
    """Accept ``"I II III"``, ``"0 1 2"`` or a list of either form."""
    items = raw.split() if isinstance(raw, str) else list(raw)
    result: List[int] = []
    for item in items:
        if isinstance(item, int) and not isinstance(item, bool):
            result.append(item)
            continue
        label = str(item).strip().upper()
        if label.isdecimal():
            result.append(int(label))
        elif label in ROTOR_NAMES:
            result.append(ROTOR_NAMES[label])
        else:
            names = " ".join(spec.name for spec in ROTORS)
            raise ConfigurationError(f"Unknown rotor {item!r}; choose from {names}")
    return result


# ────────────────────────────────────────────────────────────────────────
#  2. Interactive question helpers
# ────────────────────────────────────────────────────────────────────────


def _ask_until_valid(prompt: str, parse):
    while True:
        try:
            return parse(ask(prompt))
        except ConfigurationError as exc:
            print(f"❌  {exc}")


def get_rotor_selection() -> List[int]:
    names = " ".join(spec.name for spec in ROTORS)
    print("\nAvailable Rotors:", names)
    return _ask_until_valid(f"Select {ROTOR_COUNT} rotors, left to right: ", parse_rotors)


def get_positions() -> List[int]:
    return _ask_until_valid(f"{ROTOR_COUNT} rotor positions 0-{SIZE - 1}: ", parse_numbers)


def get_ring_settings() -> List[int]:
    return _ask_until_valid(f"{ROTOR_COUNT} ring settings 0-{SIZE - 1}: ", parse_numbers)


def get_plugboard() -> List[Tuple[str, str]]:
    print(f"\nPlugboard pairs (≤{MAX_PAIRS}, e.g. AB CD EF):")
    return _ask_until_valid("Pairs (Enter for none): ", parse_pairs)


# ────────────────────────────────────────────────────────────────────────
#  3. Settings files & output
# ────────────────────────────────────────────────────────────────────────


def load_settings(path: str | Path) -> Dict:
    """Read machine settings from JSON and normalise rotor names to indices."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Cannot read settings from {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings in {path} must be a JSON object")

    missing = REQUIRED_KEYS - data.keys()
    if missing:
        raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")

    return {
        "rotors": parse_rotors(data["rotors"]),
        "positions": list(data["positions"]),
        "rings": list(data["rings"]),
        "plugs": list(normalise_pairs(data.get("plugs", []))),
    }


def group_blocks(text: str, block: int) -> str:
    """Regroup the letters of *text* into *block*-sized groups (0 keeps *text*)."""
    if block <= 0:
        return text
    letters = "".join(ch for ch in text if not ch.isspace())
    return " ".join(letters[i : i + block] for i in range(0, len(letters), block))


__all__ = [
    "parse_numbers",
    "parse_pairs",
    "parse_rotors",
    "get_rotor_selection",
    "get_positions",
    "get_ring_settings",
    "get_plugboard",
    "load_settings",
    "group_blocks",
]
