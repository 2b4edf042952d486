from __future__ import annotations

import pytest

from tea_cipher.cipher import decrypt, encrypt
from tea_cipher.errors import CipherError, InvalidArgument, MalformedInput

ZERO_KEY_HEX = "0x00000000000000000000000000000000"
KEY_HEX = "0123456789abcdeffedcba9876543210"


def test_all_zero_vector() -> None:
    ciphertext = encrypt("0x0000000000000000", ZERO_KEY_HEX)
    assert ciphertext == "41ea3a0a94baa940"
    assert decrypt(ciphertext, ZERO_KEY_HEX) == "0"


@pytest.mark.parametrize(
    "block_hex",
    ["0", "1", "deadbeef", "0123456789abcdef", "8000000000000000", "ffffffffffffffff"],
)
def test_roundtrip(block_hex: str) -> None:
    ciphertext = encrypt(block_hex, KEY_HEX)
    assert decrypt(ciphertext, KEY_HEX) == format(int(block_hex, 16), "x")


def test_deterministic() -> None:
    assert encrypt("cafebabe", KEY_HEX) == encrypt("cafebabe", KEY_HEX)
    assert decrypt("cafebabe", KEY_HEX) == decrypt("cafebabe", KEY_HEX)


def test_prefix_is_noop() -> None:
    plain = encrypt("01", KEY_HEX)
    assert encrypt("0x01", "0x" + KEY_HEX) == plain
    assert encrypt("0X01", "0X" + KEY_HEX.upper()) == plain
    assert decrypt("0x" + plain, KEY_HEX) == "1"


def test_short_key_prefix_fails_same_way() -> None:
    for key in ("0xFF", "FF"):
        with pytest.raises(MalformedInput) as info:
            encrypt("01", key)
        assert info.value.reason == "invalid_key_length"


@pytest.mark.parametrize("bit", [0, 31, 32, 63, 64, 95, 96, 127])
def test_key_bit_flip_changes_ciphertext(bit: int) -> None:
    flipped = format(int(KEY_HEX, 16) ^ (1 << bit), "032x")
    assert encrypt("0123456789abcdef", flipped) != encrypt("0123456789abcdef", KEY_HEX)


def test_96_bit_key_rejected() -> None:
    with pytest.raises(MalformedInput):
        encrypt("01", "0x" + "ab" * 12)


def test_block_overflow_rejected() -> None:
    with pytest.raises(MalformedInput) as info:
        encrypt("0x1ffffffffffffffff", KEY_HEX)
    assert info.value.reason == "block_overflow"


@pytest.mark.parametrize(
    ("plaintext", "key", "param"),
    [
        ("", "anykey", "plaintext"),
        ("plaintext", "   ", "key"),
        (None, KEY_HEX, "plaintext"),
        ("01", None, "key"),
        ("\t\n", KEY_HEX, "plaintext"),
    ],
)
def test_encrypt_invalid_argument(plaintext, key, param: str) -> None:
    with pytest.raises(InvalidArgument) as info:
        encrypt(plaintext, key)
    assert info.value.param == param
    assert str(info.value) == "argument:null_or_whitespace"


def test_decrypt_names_ciphertext() -> None:
    with pytest.raises(InvalidArgument) as info:
        decrypt(" ", KEY_HEX)
    assert info.value.param == "ciphertext"


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        encrypt("zz", KEY_HEX)
    assert issubclass(InvalidArgument, CipherError)
    assert issubclass(MalformedInput, CipherError)


def test_key_checked_before_block() -> None:
    with pytest.raises(MalformedInput) as info:
        encrypt("zz", "ff")
    assert info.value.stage == "key"
