# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List

from alphabet import ALPHABET, SIZE
from enigma import ROTOR_COUNT
from rotor_and_reflector import ROTORS

DEFAULT_PAIRS = 10      # wartime key sheets used ten plug cables

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, SIZE // 2))
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(rng: Random | SystemRandom, pairs: int = DEFAULT_PAIRS) -> Dict:
    """One day's machine settings in the JSON layout ``load_settings`` reads."""
    return {
        "rotors": [ROTORS[i].name for i in rng.sample(range(len(ROTORS)), ROTOR_COUNT)],
        "positions": [rng.randrange(SIZE) for _ in range(ROTOR_COUNT)],
        "rings": [rng.randrange(SIZE) for _ in range(ROTOR_COUNT)],
        "plugs": choose_pairs(pairs, rng),
    }


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate Enigma daily settings")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--pairs", type=int, default=DEFAULT_PAIRS, help="Plug pairs (default 10)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_settings.json"),
        help="Destination JSON file (default: enigma_settings.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)
    cfg = generate_settings(build_rng(args.seed), args.pairs)

    args.outfile.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {cfg['rotors']}\n"
        f"   positions   : {cfg['positions']}\n"
        f"   rings       : {cfg['rings']}\n"
        f"   plug pairs  : {len(cfg['plugs'])}")


if __name__ == "__main__":
    main()
