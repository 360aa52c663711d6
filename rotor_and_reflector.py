# rotor_and_reflector.py
from __future__ import annotations

from typing import NamedTuple

from alphabet import ALPHABET, SIZE, mod, to_index, to_letter
from debug import Debug
from errors import ConfigurationError

debug = Debug()


class WheelSpec(NamedTuple):
    """Literal wiring of one historical wheel."""

    name: str
    wiring: str
    notch: str


def _check_setting(label: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{label} must be an integer, got {value!r}")
    if not 0 <= value < SIZE:
        raise ConfigurationError(f"{label} {value} out of range 0–{SIZE - 1}")
    return value


class Rotor:
    def __init__(
        self,
        wiring: str,
        notch: str,
        ring_setting: int = 0,
        position: int = 0,
    ) -> None:
        if sorted(wiring) != sorted(ALPHABET):
            raise ConfigurationError("wiring must be a permutation of alphabet")
        if len(notch) != 1 or notch not in ALPHABET:
            raise ConfigurationError(f"Notch {notch!r} must be one letter of the alphabet")

        self.wiring = wiring
        self.notch = notch

        # integer lookup tables
        self._fwd = tuple(to_index(c) for c in wiring)
        self._rev = tuple(wiring.index(c) for c in ALPHABET)

        self.ring_setting = _check_setting("ring setting", ring_setting)
        self.position = _check_setting("position", position)

    @classmethod
    def from_spec(cls, spec: WheelSpec, ring_setting: int = 0, position: int = 0) -> "Rotor":
        return cls(spec.wiring, spec.notch, ring_setting, position)

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self.position = mod(self.position + 1)
        debug.log("stepping", f"Rotor pos {self.position}, at_notch={self.at_notch()}")

    def at_notch(self) -> bool:
        """True while the visible letter sits on the notch."""
        return ALPHABET[self.position] == self.notch

    @property
    def window(self) -> str:
        return ALPHABET[self.position]

    # ── signal paths ---------------------------------------------
    def _through(self, table: tuple[int, ...], letter: str) -> str:
        offset = self.position - self.ring_setting
        mapped = table[mod(to_index(letter) + offset)]
        return to_letter(mapped - offset)

    def forward(self, letter: str) -> str:
        out = self._through(self._fwd, letter)
        debug.log("rotor", f"fwd {letter}->{out} @ {self.window}")
        return out

    def backward(self, letter: str) -> str:
        out = self._through(self._rev, letter)
        debug.log("rotor", f"bwd {letter}->{out} @ {self.window}")
        return out

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor pos={self.position} ring={self.ring_setting} notch={self.notch}>"


class Reflector:
    def __init__(self, wiring: str) -> None:
        if len(wiring) != SIZE or sorted(wiring) != sorted(ALPHABET):
            raise ConfigurationError("Reflector wiring must be a permutation of alphabet")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = to_index(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ConfigurationError("Reflector wiring must be an involution with no fixed points")

        self.wiring = wiring

    def reflect(self, letter: str) -> str:
        out = self.wiring[to_index(letter)]
        debug.log("reflector", f"{letter}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring}>"


# ────────────────────────────────────────────────────────────────────────
#  Wheel database (Enigma I / M3)
# ────────────────────────────────────────────────────────────────────────

ROTORS: tuple[WheelSpec, ...] = (
    WheelSpec("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    WheelSpec("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    WheelSpec("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    WheelSpec("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    WheelSpec("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
)

ROTOR_NAMES: dict[str, int] = {spec.name: i for i, spec in enumerate(ROTORS)}

REFLECTOR_B = Reflector("YRUHQSLDPXNGOKMIEBFZCWVJAT")

__all__ = [
    "Rotor",
    "Reflector",
    "WheelSpec",
    "ROTORS",
    "ROTOR_NAMES",
    "REFLECTOR_B",
]
