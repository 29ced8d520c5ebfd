"""
Iterative ECFP feature generation.

Depth 0 seeds one feature per atom from its invariant. Each later depth
rebuilds every atom's identifier from its neighbours' identifiers at the
previous depth and offers the result to the registry, up to and including
``radius``.
"""
import logging
from typing import List, Set, Tuple

from .coverage import BondCoverage, bond_id
from .hashing import check_hash_func
from .invariants import invariant_identifiers
from .pairs import Pair, pairs_to_hash
from .registry import FeatureRegistry

logger = logging.getLogger(__name__)

# Bond order used for an atom's own root pair at depth 0.
ROOT_BOND = 0

Candidate = Tuple[List[Pair], BondCoverage]


class ECFPExpander:
    """
    Radius-bounded feature expansion for a single molecule at a time.

    A new FeatureRegistry is created for every call to ``run``; nothing is
    carried over between molecules.

    Usage:
        expander = ECFPExpander(radius=2)
        features = expander.run(MolGraph.from_smiles('CCO'))
    """

    def __init__(self, radius: int = 2, hash_func: str = 'xxhash'):
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        self.radius = radius
        self.hash_func = check_hash_func(hash_func)

    def _candidates(self, graph, identifiers: List[int], depth: int) -> List[Candidate]:
        """Pairs and own-bond coverage for every atom, from last depth's identifiers."""
        candidates = []
        for sid in graph.atom_ids():
            if depth == 0:
                candidates.append(([Pair(identifiers[sid], ROOT_BOND)], BondCoverage(depth=0)))
                continue
            pairs = []
            bonds = set()
            for tid in graph.neighbors(sid):
                pairs.append(Pair(identifiers[tid], int(graph.bond_order(sid, tid))))
                bonds.add(bond_id(sid, tid))
            candidates.append((pairs, BondCoverage(frozenset(bonds), depth)))
        return candidates

    def expand(self, graph, registry: FeatureRegistry) -> FeatureRegistry:
        identifiers = invariant_identifiers(graph, self.hash_func)

        for depth in range(self.radius + 1):
            next_identifiers = list(identifiers)
            for sid, (pairs, coverage) in enumerate(self._candidates(graph, identifiers, depth)):
                coverage = registry.lookup_coverage(coverage, pairs)
                fingerprint = pairs_to_hash(pairs, self.hash_func)
                next_identifiers[sid] = registry.submit(fingerprint, coverage)
            registry.commit()
            identifiers = next_identifiers
            logger.debug("depth %d: %d features", depth, len(registry))

        return registry

    def run(self, graph) -> Set[int]:
        """
        Generate the fingerprint set for one molecule graph.

        Raises:
            InternalInconsistency: see FeatureRegistry.submit
        """
        return self.expand(graph, FeatureRegistry()).fingerprints()

    def __repr__(self) -> str:
        return f"ECFPExpander(radius={self.radius}, hash={self.hash_func})"


def mol_to_features(graph, radius: int = 2, hash_func: str = 'xxhash') -> Set[int]:
    """Set of ECFP fingerprint values for ``graph`` up to ``radius``."""
    return ECFPExpander(radius, hash_func).run(graph)


__all__ = ['ROOT_BOND', 'ECFPExpander', 'mol_to_features']
