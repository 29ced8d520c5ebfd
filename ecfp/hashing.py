"""
Stable 64-bit hashing of integer sequences.

Both hashers operate on the raw bytes of a little-endian uint64 array, so a
given sequence hashes to the same value on every run and every platform.
"""
from typing import Iterable, Sequence, Union

import numpy as np

import blake3
import xxhash

HASH_FUNCS = ['xxhash', 'blake3']

_MASK_64 = (1 << 64) - 1

IntOrPair = Union[int, Sequence[int]]


def _as_bytes(values: Iterable[IntOrPair]) -> bytes:
    flat = []
    for value in values:
        if isinstance(value, (tuple, list)):
            flat.extend(int(v) & _MASK_64 for v in value)
        else:
            flat.append(int(value) & _MASK_64)
    return np.asarray(flat, dtype='<u8').tobytes()


def check_hash_func(hash_func: str) -> str:
    if hash_func not in HASH_FUNCS:
        raise ValueError(f"hash_func must be one of {HASH_FUNCS}, got {hash_func}")
    return hash_func


def hash_64(values: Iterable[IntOrPair], hash_func: str = 'xxhash') -> int:
    """
    Hash a sequence of integers (or integer tuples) to an unsigned 64-bit int.

    Args:
        values: Integers, or tuples of integers which are flattened in order.
            Negative values are taken modulo 2**64.
        hash_func: 'xxhash' (XXH3-64) or 'blake3' (first 8 digest bytes)

    Returns:
        Python int in [0, 2**64)
    """
    check_hash_func(hash_func)
    data = _as_bytes(values)
    if hash_func == 'xxhash':
        return xxhash.xxh3_64_intdigest(data)
    return int.from_bytes(blake3.blake3(data).digest(length=8), 'little')


__all__ = ['HASH_FUNCS', 'check_hash_func', 'hash_64']
