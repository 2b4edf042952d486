from __future__ import annotations

import re
import struct

from .errors import MalformedInput

KEY_HEX_LEN = 32
BLOCK_BITS = 64

_MASK32 = 0xFFFFFFFF
_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def strip_hex_prefix(value: str) -> str:
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def pad_to_even_length(value: str) -> str:
    if len(value) % 2 != 0:
        return "0" + value
    return value


def _require_hex(value: str, stage: str) -> None:
    # int() and bytes.fromhex() both tolerate whitespace, underscores or signs.
    if not _HEX_RE.fullmatch(value):
        raise MalformedInput(
            stage=stage,
            reason="non_hex_characters",
            details={"hex_len": len(value)},
        )


def decode_key_words(key_hex: str) -> tuple[int, int, int, int]:
    padded = pad_to_even_length(strip_hex_prefix(key_hex))
    if len(padded) != KEY_HEX_LEN:
        raise MalformedInput(
            stage="key",
            reason="invalid_key_length",
            details={"hex_len": len(padded), "expected": KEY_HEX_LEN},
        )
    _require_hex(padded, "key")
    return struct.unpack(">4I", bytes.fromhex(padded))


def decode_block(block_hex: str) -> tuple[int, int]:
    digits = strip_hex_prefix(block_hex)
    if not digits:
        raise MalformedInput(stage="block", reason="empty_hex", details={})
    _require_hex(digits, "block")

    value = int(digits, 16)
    if value.bit_length() > BLOCK_BITS:
        raise MalformedInput(
            stage="block",
            reason="block_overflow",
            details={"bit_length": value.bit_length(), "max_bits": BLOCK_BITS},
        )
    return value >> 32, value & _MASK32


def encode_block(left: int, right: int) -> str:
    return format(((left & _MASK32) << 32) | (right & _MASK32), "x")
