"""
Feature registry with the Rogers & Hahn duplicate-removal rules.

When two features cover exactly the same bonds:

1. If they were generated at different iterations, the one from the
   later iteration is rejected.
2. If they were generated at the same iteration, the one with the larger
   hashed identifier is rejected.

(Rogers, D.; Hahn, M. "Extended-Connectivity Fingerprints".
J. Chem. Inf. Model. 2010, 50 (5), 742-754.)
"""
import logging
from dataclasses import dataclass
from typing import List, Sequence, Set

from .coverage import BondCoverage, extend_coverage
from .exceptions import InternalInconsistency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Feature:
    fingerprint: int
    coverage: BondCoverage

    @property
    def depth(self) -> int:
        return self.coverage.depth


class FeatureRegistry:
    """
    Accepted features for one molecule.

    ``accepted`` holds every feature kept from completed depths; ``current``
    holds the batch being built for the depth in progress. Features are never
    modified: supersession removes the old one and appends the new one.

    Bond spans are compared against ``accepted`` only, never against
    ``current``. Two features from the same depth that cover the same bonds
    with different fingerprints are therefore both kept. The same-depth
    branch of ``submit`` is only reached when a caller submits again at a
    depth it has already committed; ECFPExpander never does.

    Usage:
        registry = FeatureRegistry()
        h = registry.submit(fingerprint, coverage)
        ...
        registry.commit()            # end of depth
        registry.fingerprints()      # {int, ...}
    """

    def __init__(self):
        self.accepted: List[Feature] = []
        self.current: List[Feature] = []

    def lookup_coverage(self, coverage: BondCoverage, pairs: Sequence) -> BondCoverage:
        """Extend ``coverage`` with the bonds of features the pairs point at."""
        return extend_coverage(coverage, pairs, self.accepted + self.current)

    def submit(self, fingerprint: int, coverage: BondCoverage) -> int:
        """
        Offer a candidate feature for the depth in progress.

        Returns:
            ``fingerprint``, whether or not the candidate was kept. It becomes
            the atom's identifier for the next depth either way.

        Raises:
            InternalInconsistency: an accepted feature already has the same
                fingerprint, the same bonds and the same depth.
        """
        if any(f.fingerprint == fingerprint for f in self.current):
            return fingerprint

        if coverage.is_empty:
            self.current.append(Feature(fingerprint, coverage))
            return fingerprint

        for i, existing in enumerate(self.accepted):
            if existing.coverage.is_empty or not existing.coverage.same_span(coverage):
                continue

            if existing.depth == coverage.depth:
                if existing.fingerprint == fingerprint:
                    raise InternalInconsistency(fingerprint, coverage.depth)
                if existing.fingerprint < fingerprint:
                    return fingerprint
            elif existing.depth < coverage.depth:
                return fingerprint

            logger.debug("Feature %d@%d superseded by %d@%d",
                         existing.fingerprint, existing.depth,
                         fingerprint, coverage.depth)
            del self.accepted[i]
            break

        self.current.append(Feature(fingerprint, coverage))
        return fingerprint

    def commit(self) -> None:
        """Close the current depth: move its batch into ``accepted``."""
        self.accepted.extend(self.current)
        self.current = []

    def features(self) -> List[Feature]:
        return self.accepted + self.current

    def fingerprints(self) -> Set[int]:
        return {f.fingerprint for f in self.features()}

    def __len__(self) -> int:
        return len(self.accepted) + len(self.current)

    def __repr__(self) -> str:
        return f"FeatureRegistry(accepted={len(self.accepted)}, current={len(self.current)})"


__all__ = ['Feature', 'FeatureRegistry']
