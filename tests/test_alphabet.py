import pytest

from alphabet import ALPHABET, SIZE, is_letter, mod, to_index, to_letter


def test_alphabet_shape():
    assert SIZE == 26
    assert ALPHABET[0] == "A"
    assert ALPHABET[25] == "Z"


@pytest.mark.parametrize("n, expected", [(-1, 25), (27, 1), (0, 0), (-26, 0), (-27, 25), (52, 0)])
def test_mod_wraps_both_ways(n, expected):
    assert mod(n, 26) == expected


def test_index_and_letter():
    assert to_index("A") == 0
    assert to_index("Z") == 25
    assert to_letter(26) == "A"
    assert to_letter(-1) == "Z"


def test_to_index_rejects_non_letters():
    with pytest.raises(ValueError):
        to_index("a")


@pytest.mark.parametrize("ch", [" ", "1", ",", "a", "AB", ""])
def test_is_letter_only_for_uppercase_letters(ch):
    assert not is_letter(ch)
