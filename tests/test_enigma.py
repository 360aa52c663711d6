import pytest

from alphabet import ALPHABET
from enigma import Enigma
from errors import ConfigurationError

I_II_III = [0, 1, 2]


def machine(positions=(0, 0, 0), rings=(0, 0, 0), plugs=()):
    return Enigma(I_II_III, list(positions), list(rings), plugs)


# ── reference vectors (Enigma I, reflector B) ────────────────────

def test_reference_vector_rings_AAA():
    assert machine().process("AAAAA") == "BDZGO"


def test_reference_vector_rings_BBB():
    assert machine(rings=(1, 1, 1)).process("AAAAA") == "EWTYX"


def test_lowercase_is_uppercased():
    assert machine().process("aaaaa") == "BDZGO"


# ── stepping ─────────────────────────────────────────────────────

def test_right_rotor_steps_every_letter():
    enigma = machine()
    enigma.encrypt_char("A")
    assert enigma.positions == (0, 0, 1)


def test_right_notch_turns_middle():
    enigma = machine(positions=(0, 0, ALPHABET.index("V")))
    enigma.encrypt_char("A")
    assert enigma.window == "ABW"


def test_double_step():
    enigma = Enigma(I_II_III, [0, 3, 20], [0, 0, 0])
    assert enigma.window == "ADU"
    seen = []
    for _ in range(3):
        enigma.encrypt_char("A")
        seen.append(enigma.window)
    assert seen == ["ADV", "AEW", "BFX"]


def test_full_alphabet_of_right_rotor_moves_middle_once():
    enigma = machine()
    enigma.process("A" * 26)
    assert enigma.positions == (0, 1, 0)


def test_cycle_length_with_double_step():
    enigma = machine()
    enigma.process("A" * (26 * 25 * 26))
    assert enigma.positions == (0, 0, 0)


@pytest.mark.parametrize("plugs", [(), ("AB", "CD", "EF")])
def test_right_rotor_position_independent_of_plugboard(plugs):
    enigma = machine(positions=(3, 7, 11), plugs=plugs)
    for count in range(1, 40):
        enigma.encrypt_char("Q")
        assert enigma.positions[2] == (11 + count) % 26


# ── reciprocity ──────────────────────────────────────────────────

@pytest.mark.parametrize("positions, rings, plugs", [
    ((0, 0, 0), (0, 0, 0), ()),
    ((5, 10, 15), (1, 2, 3), ()),
    ((1, 4, 5), (1, 4, 5), ("AB", "CD", "EF")),
    ((7, 11, 19), (3, 8, 14), ("TQ", "HE", "RS")),
    ((25, 25, 25), (25, 25, 25), [a + b for a, b in zip(ALPHABET[::2], ALPHABET[1::2])]),
])
def test_same_settings_decrypt(positions, rings, plugs):
    message = "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG " * 20
    cipher = machine(positions, rings, plugs).process(message)
    assert cipher != message
    assert machine(positions, rings, plugs).process(cipher) == message


def test_attack_at_dawn_round_trip():
    cipher = machine().process("ATTACK AT DAWN")
    assert len(cipher) == len("ATTACK AT DAWN")
    assert [i for i, ch in enumerate(cipher) if ch == " "] == [6, 9]
    assert machine().process(cipher) == "ATTACK AT DAWN"


def test_hello_world_with_plugboard_round_trip():
    settings = dict(positions=(1, 4, 5), rings=(1, 4, 5), plugs=("AB", "CD", "EF"))
    cipher = machine(**settings).process("HELLO WORLD")
    assert cipher[5] == " "
    assert machine(**settings).process(cipher) == "HELLO WORLD"


def test_plugged_letters_reciprocal():
    plugs = [("A", "B"), ("C", "D"), ("E", "F")]
    cipher = machine(plugs=plugs).process("ABCDEF")
    assert machine(plugs=plugs).process(cipher) == "ABCDEF"


def test_no_letter_encrypts_to_itself():
    enigma = machine(positions=(2, 9, 17), plugs=("AZ", "MN"))
    for _ in range(5):
        for letter in ALPHABET:
            assert enigma.encrypt_char(letter) != letter


def test_repeated_letter_varies():
    assert machine().process("AAAAA") != "AAAAA"


# ── non-letters ──────────────────────────────────────────────────

def test_empty_message():
    assert machine().process("") == ""


def test_non_letters_are_transparent():
    mixed, letters_only = machine(), machine()
    out = mixed.process("HELLO, WORLD! 123")
    ref = letters_only.process("HELLOWORLD")

    assert out[5:7] == ", "
    assert out[12:] == "! 123"
    assert out.replace(", ", "").replace("! 123", "") == ref
    assert mixed.positions == letters_only.positions


def test_only_punctuation_does_not_step():
    enigma = machine()
    assert enigma.process("123 .,!?") == "123 .,!?"
    assert enigma.positions == (0, 0, 0)


def test_instances_are_independent():
    a, b = machine(), machine()
    a.process("SOME TRAFFIC")
    assert b.positions == (0, 0, 0)
    assert b.process("AAAAA") == "BDZGO"


# ── construction ─────────────────────────────────────────────────

@pytest.mark.parametrize("args", [
    ([0, 1], [0, 0, 0], [0, 0, 0]),
    ([0, 1, 2, 3], [0, 0, 0], [0, 0, 0]),
    ([0, 1, 5], [0, 0, 0], [0, 0, 0]),
    ([0, 0, 1], [0, 0, 0], [0, 0, 0]),
    ([0, 1, -1], [0, 0, 0], [0, 0, 0]),
    ([0, 1, 2], [0, 0, 26], [0, 0, 0]),
    ([0, 1, 2], [0, 0, 0], [-1, 0, 0]),
    ([0, 1, 2], [0, 0], [0, 0, 0]),
    ([0, 1, 2], [0, 0, 0], [0, 0, 0, 0]),
])
def test_invalid_construction(args):
    with pytest.raises(ConfigurationError):
        Enigma(*args)


def test_reused_plug_letter_rejected():
    with pytest.raises(ConfigurationError):
        Enigma(I_II_III, [0, 0, 0], [0, 0, 0], [("A", "B"), ("B", "C")])


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        Enigma(I_II_III, [0, 0, 0], [0, 0, 0], ["AA"])


def test_from_settings():
    enigma = Enigma.from_settings({"rotors": [0, 1, 2], "positions": [0, 0, 0], "rings": [0, 0, 0]})
    assert enigma.process("AAAAA") == "BDZGO"
    assert "I-II-III" in repr(enigma)


def test_encrypt_char_folds_lowercase():
    assert machine().encrypt_char("a") == "B"


@pytest.mark.parametrize("ch", ["1", " ", ",", "ß", ""])
def test_encrypt_char_non_letter_does_not_step(ch):
    enigma = machine()
    assert enigma.encrypt_char(ch) == ch
    assert enigma.positions == (0, 0, 0)
    assert enigma.process("AAAAA") == "BDZGO"


def test_attack_at_dawn_ciphertext():
    assert machine().process("ATTACK AT DAWN") == "BZHGNO CR RTCM"


def test_hello_world_ciphertext_with_plugboard():
    enigma = machine(positions=(1, 4, 5), rings=(1, 4, 5), plugs=("AB", "CD", "EF"))
    assert enigma.process("HELLO WORLD") == "ARSCU BGEPW"
