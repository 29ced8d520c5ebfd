"""
Tests for FeatureRegistry duplicate removal and supersession.
"""
import pytest

from ecfp import FeatureRegistry, InternalInconsistency
from ecfp.coverage import BondCoverage

SPAN = frozenset({(0, 1), (1, 2)})
OTHER_SPAN = frozenset({(2, 3)})


def cov(depth, bonds=SPAN):
    return BondCoverage(bonds, depth)


def test_depth_zero_always_inserted():
    registry = FeatureRegistry()
    registry.submit(1, BondCoverage())
    registry.submit(2, BondCoverage())
    registry.commit()
    assert registry.fingerprints() == {1, 2}


def test_duplicate_within_depth_ignored():
    registry = FeatureRegistry()
    assert registry.submit(5, cov(1)) == 5
    assert registry.submit(5, cov(1, OTHER_SPAN)) == 5
    assert len(registry) == 1
    # first submission's coverage is kept
    assert registry.current[0].coverage.bonds == SPAN


def test_same_span_within_depth_not_compared():
    registry = FeatureRegistry()
    # spans are only compared against earlier depths
    registry.submit(5, cov(1))
    registry.submit(9, cov(1))
    registry.commit()
    assert registry.fingerprints() == {5, 9}


def test_same_depth_lower_hash_kept():
    registry = FeatureRegistry()
    registry.submit(10, cov(1))
    registry.commit()
    assert registry.submit(20, cov(1)) == 20
    registry.commit()
    assert registry.fingerprints() == {10}


def test_same_depth_lower_hash_supersedes():
    registry = FeatureRegistry()
    registry.submit(10, cov(1))
    registry.commit()
    registry.submit(7, cov(1))
    assert [f.fingerprint for f in registry.accepted] == []
    registry.commit()
    assert registry.fingerprints() == {7}


def test_shallower_feature_supersedes_deeper():
    registry = FeatureRegistry()
    registry.submit(10, cov(2))
    registry.commit()
    registry.submit(30, cov(1))
    registry.commit()
    assert registry.fingerprints() == {30}
    assert registry.features()[0].depth == 1


def test_deeper_feature_discarded():
    registry = FeatureRegistry()
    registry.submit(10, cov(1))
    registry.commit()
    assert registry.submit(3, cov(2)) == 3
    registry.commit()
    assert registry.fingerprints() == {10}


def test_different_span_kept():
    registry = FeatureRegistry()
    registry.submit(10, cov(1))
    registry.commit()
    registry.submit(11, cov(2, OTHER_SPAN))
    registry.commit()
    assert registry.fingerprints() == {10, 11}


def test_depth_zero_features_never_superseded():
    registry = FeatureRegistry()
    registry.submit(1, BondCoverage())
    registry.commit()
    registry.submit(2, cov(1))
    registry.commit()
    assert registry.fingerprints() == {1, 2}


def test_identical_resubmission_raises():
    registry = FeatureRegistry()
    registry.submit(5, cov(1))
    registry.commit()
    with pytest.raises(InternalInconsistency) as excinfo:
        registry.submit(5, cov(1))
    assert excinfo.value.fingerprint == 5
    assert excinfo.value.depth == 1


def test_lookup_coverage_uses_accepted_and_current():
    registry = FeatureRegistry()
    registry.submit(5, cov(1))
    registry.commit()
    registry.submit(6, cov(2, OTHER_SPAN))

    class P:
        def __init__(self, atom):
            self.atom = atom

    extended = registry.lookup_coverage(BondCoverage(frozenset({(9, 10)}), 2), [P(5), P(6)])
    assert extended.bonds == SPAN | OTHER_SPAN | {(9, 10)}
