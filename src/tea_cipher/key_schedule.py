from __future__ import annotations

from .hexcodec import decode_key_words

KeyWords = tuple[int, int, int, int]


def expand(key_hex: str) -> KeyWords:
    """Split a 128-bit hex key into the four subkey words used by every round."""
    return decode_key_words(key_hex)
