from __future__ import annotations

from typing import Optional

from . import key_schedule
from .errors import InvalidArgument
from .hexcodec import decode_block, encode_block
from .tea import tea_decrypt_block, tea_encrypt_block


def _require_text(value: Optional[str], param: str) -> None:
    if value is None or not value.strip():
        raise InvalidArgument(
            stage="argument",
            reason="null_or_whitespace",
            details={"param": param},
            param=param,
        )


def encrypt(plaintext: str, key: str) -> str:
    """Encrypt one 64-bit hex block under a 128-bit hex key.

    Both values may carry a ``0x`` prefix. The result is lowercase hex without
    prefix or leading zeros.

    Raises InvalidArgument for a missing, empty or whitespace-only value and
    MalformedInput when either value does not decode.
    """
    _require_text(plaintext, "plaintext")
    _require_text(key, "key")

    key_words = key_schedule.expand(key)
    left, right = decode_block(plaintext)
    return encode_block(*tea_encrypt_block(left, right, key_words))


def decrypt(ciphertext: str, key: str) -> str:
    """Decrypt one 64-bit hex block produced by :func:`encrypt`."""
    _require_text(ciphertext, "ciphertext")
    _require_text(key, "key")

    key_words = key_schedule.expand(key)
    left, right = decode_block(ciphertext)
    return encode_block(*tea_decrypt_block(left, right, key_words))
