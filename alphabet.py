# alphabet.py
from __future__ import annotations

import string

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)

_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


def mod(n: int, m: int = SIZE) -> int:
    """True modulo: the result always lies in ``0..m-1``, even for negative *n*."""
    return ((n % m) + m) % m


def is_letter(ch: str) -> bool:
    return ch in _INDEX


# letter → integer signal
def to_index(letter: str) -> int:
    try:
        return _INDEX[letter]
    except KeyError:
        raise ValueError(f"Invalid character {letter!r} for the alphabet.")


# integer signal → letter
def to_letter(signal: int) -> str:
    return ALPHABET[mod(signal)]
