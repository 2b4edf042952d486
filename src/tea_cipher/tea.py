from __future__ import annotations

from typing import Sequence

DELTA = 0x9E3779B9
ROUNDS = 32
MASK32 = 0xFFFFFFFF


def _check_words(left: int, right: int, key_words: Sequence[int]) -> None:
    if len(key_words) != 4:
        raise ValueError("TEA key must be 4 words")
    for word in (left, right, *key_words):
        if not 0 <= word <= MASK32:
            raise ValueError("TEA words must be unsigned 32-bit integers")


def tea_encrypt_block(left: int, right: int, key_words: Sequence[int]) -> tuple[int, int]:
    _check_words(left, right, key_words)
    k0, k1, k2, k3 = key_words

    summation = 0
    for _ in range(ROUNDS):
        summation = (summation + DELTA) & MASK32
        left = (left + ((((right << 4) + k0) & MASK32) ^ ((right + summation) & MASK32) ^ ((right >> 5) + k1))) & MASK32
        # right mixes in the left half already updated this round
        right = (right + ((((left << 4) + k2) & MASK32) ^ ((left + summation) & MASK32) ^ ((left >> 5) + k3))) & MASK32

    return left, right


def tea_decrypt_block(left: int, right: int, key_words: Sequence[int]) -> tuple[int, int]:
    _check_words(left, right, key_words)
    k0, k1, k2, k3 = key_words

    summation = (DELTA * ROUNDS) & MASK32
    for _ in range(ROUNDS):
        right = (right - ((((left << 4) + k2) & MASK32) ^ ((left + summation) & MASK32) ^ ((left >> 5) + k3))) & MASK32
        left = (left - ((((right << 4) + k0) & MASK32) ^ ((right + summation) & MASK32) ^ ((right >> 5) + k1))) & MASK32
        summation = (summation - DELTA) & MASK32

    return left, right
