"""
Canonical ordering and hashing of an atom's (neighbour, bond order) pairs.
"""
from typing import List, NamedTuple, Sequence

from .hashing import hash_64


class Pair(NamedTuple):
    atom: int
    bond: int


def sort_pairs(pairs: Sequence[Pair]) -> List[Pair]:
    """Order by bond order, then by neighbour identifier."""
    return sorted(pairs, key=lambda p: (p.bond, p.atom))


def pairs_to_hash(pairs: Sequence[Pair], hash_func: str = 'xxhash') -> int:
    # An empty list (isolated atom) still hashes, to the empty sequence.
    return hash_64(sort_pairs(pairs), hash_func)


__all__ = ['Pair', 'sort_pairs', 'pairs_to_hash']
