# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from alphabet import is_letter
from debug import Debug
from errors import ConfigurationError
from plugboard import Pair, Plugboard
from rotor_and_reflector import REFLECTOR_B, ROTORS, Reflector, Rotor

debug = Debug()

ROTOR_COUNT = 3


def _three(label: str, values: Sequence) -> list:
    values = list(values)
    if len(values) != ROTOR_COUNT:
        raise ConfigurationError(
            f"Need exactly {ROTOR_COUNT} {label}, got {len(values)}"
        )
    return values


class Enigma:
    """Three-rotor Enigma I / M3 with reflector B.

    Rotors are held as ``[left, middle, right]``; the right rotor moves on
    every letter. Only the rotor positions change after construction.
    """

    def __init__(
        self,
        rotor_selection: Sequence[int],
        initial_positions: Sequence[int],
        ring_settings: Sequence[int],
        plugboard_pairs: Iterable[str | Pair] = (),
    ) -> None:
        selection = _three("rotor selections", rotor_selection)
        positions = _three("rotor positions", initial_positions)
        rings = _three("ring settings", ring_settings)

        for idx in selection:
            if isinstance(idx, bool) or not isinstance(idx, int) or not 0 <= idx < len(ROTORS):
                raise ConfigurationError(
                    f"Rotor selection {idx!r} out of range 0–{len(ROTORS) - 1}"
                )
        if len(set(selection)) != ROTOR_COUNT:
            raise ConfigurationError(f"Rotor selections must be distinct: {selection}")

        self.rotor_selection: tuple[int, ...] = tuple(selection)
        self.rotors: list[Rotor] = [
            Rotor.from_spec(ROTORS[idx], ring, pos)
            for idx, pos, ring in zip(selection, positions, rings)
        ]
        self.plugboard = Plugboard(plugboard_pairs)
        self.reflector: Reflector = REFLECTOR_B

    @classmethod
    def from_settings(cls, settings: Mapping) -> "Enigma":
        """Build a machine from a settings dict (see ``utilities.load_settings``)."""
        return cls(
            settings["rotors"],
            settings["positions"],
            settings["rings"],
            settings.get("plugs", ()),
        )

    # ── state ───────────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self.rotors)

    @property
    def window(self) -> str:
        """Visible letters, left to right."""
        return "".join(r.window for r in self.rotors)

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors one key-press, including the middle-rotor double step."""
        left, middle, right = self.rotors

        # read both notches before anything moves
        middle_at_notch = middle.at_notch()
        right_at_notch = right.at_notch()

        if middle_at_notch:
            left.step()
            middle.step()
        elif right_at_notch:
            middle.step()
        right.step()

        debug.log("stepping", f"window {self.window}")

    # ── encipher one letter  ────────────────────────────────────

    def encrypt_char(self, letter: str) -> str:
        """Encipher one letter; anything that is not A-Z comes back as is, unstepped."""
        if not is_letter(letter.upper()):
            return letter
        letter = letter.upper()

        self._step_rotors()

        out = self.plugboard.swap(letter)

        for rotor in reversed(self.rotors):
            out = rotor.forward(out)

        out = self.reflector.reflect(out)

        for rotor in self.rotors:
            out = rotor.backward(out)

        out = self.plugboard.swap(out)
        debug.log("encipher", f"{letter}->{out}")
        return out

    def process(self, text: str) -> str:
        """Encrypt (or decrypt) *text*; non-letters pass through without stepping."""
        return "".join(
            self.encrypt_char(ch) for ch in text.upper()
        )

    def __repr__(self) -> str:
        names = "-".join(ROTORS[i].name for i in self.rotor_selection)
        return f"<Enigma {names} window={self.window} {self.plugboard!r}>"
