"""
Bond coverage: which graph bonds a feature's substructure spans.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Sequence, Tuple

BondId = Tuple[int, int]


def bond_id(a: int, b: int) -> BondId:
    """Order-independent identifier for the bond between atoms a and b."""
    return (a, b) if a <= b else (b, a)


@dataclass(frozen=True)
class BondCoverage:
    bonds: FrozenSet[BondId] = field(default_factory=frozenset)
    depth: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.bonds

    def union(self, bonds: Iterable[BondId]) -> 'BondCoverage':
        return BondCoverage(self.bonds | frozenset(bonds), self.depth)

    def same_span(self, other: 'BondCoverage') -> bool:
        return self.bonds == other.bonds


def extend_coverage(coverage: BondCoverage, pairs: Sequence, features: Iterable) -> BondCoverage:
    """
    Fold in the coverage of every feature whose fingerprint is one of the
    neighbour identifiers in ``pairs``.

    Args:
        coverage: The atom's own incident bonds at this depth
        pairs: The atom's (neighbour identifier, bond order) pairs
        features: Features to search, in registry order

    Returns:
        New BondCoverage at the same depth
    """
    by_fingerprint = {}
    for feature in features:
        by_fingerprint.setdefault(feature.fingerprint, feature)

    bonds = set()
    for pair in pairs:
        found = by_fingerprint.get(pair.atom)
        if found is not None:
            bonds.update(found.coverage.bonds)
    return coverage.union(bonds)


__all__ = ['BondId', 'bond_id', 'BondCoverage', 'extend_coverage']
