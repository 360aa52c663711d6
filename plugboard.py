# plugboard.py
from __future__ import annotations

from collections.abc import Iterable

from alphabet import ALPHABET, SIZE, is_letter
from debug import Debug
from errors import ConfigurationError

debug = Debug()

MAX_PAIRS = SIZE // 2

Pair = tuple[str, str]


def plugboard_swap(letter: str, pairs: Iterable[Pair]) -> str:
    """Return the partner of *letter* in *pairs*, or *letter* if unplugged."""
    for a, b in pairs:
        if letter == a:
            return b
        if letter == b:
            return a
    return letter


def normalise_pairs(pairs: Iterable[str | Pair]) -> tuple[Pair, ...]:
    """Validate plug pairs given as ``"AB"`` strings or ``("A", "B")`` tuples."""
    pairs = list(pairs)
    if len(pairs) > MAX_PAIRS:
        raise ConfigurationError(f"Too many plug pairs ({len(pairs)} > {MAX_PAIRS})")

    result: list[Pair] = []
    used: set[str] = set()

    for raw in pairs:
        # normalise to (a, b)
        if len(raw) != 2:
            raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
        a, b = (str(c).upper() for c in raw)

        if not (is_letter(a) and is_letter(b)):
            bad = b if is_letter(a) else a
            raise ConfigurationError(f"Symbol {bad!r} not in alphabet")
        if a == b:
            raise ConfigurationError(f"Plugboard cannot map a letter to itself: {a}")
        if a in used or b in used:
            dup = a if a in used else b
            raise ConfigurationError(f"Letter {dup!r} already used in plugboard")

        result.append((a, b))
        used.update((a, b))

    return tuple(result)


class Plugboard:
    def __init__(self, pairs: Iterable[str | Pair] = ()) -> None:
        self.pairs: tuple[Pair, ...] = normalise_pairs(pairs)
        mapping = {ch: ch for ch in ALPHABET}
        for a, b in self.pairs:
            mapping[a], mapping[b] = b, a
        self._mapping = mapping

    # the same wiring serves both directions
    def swap(self, letter: str) -> str:
        out = self._mapping[letter]
        debug.log("plugboard", f"{letter}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(a + b for a, b in self.pairs)}>"
