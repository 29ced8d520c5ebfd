"""
ECFP - Extended-Connectivity Fingerprints

A pure-Python implementation of the Rogers & Hahn ECFP algorithm:
- Daylight-style atom invariants
- Iterative neighbour hashing up to a bounded radius
- Duplicate-substructure removal by bond coverage
- Stable 64-bit hashing (xxhash, blake3)

Example:
    >>> from ecfp import FingerprintGenerator, MolGraph, mol_to_features
    >>>
    >>> features = mol_to_features(MolGraph.from_smiles('CCO'), radius=2)
    >>>
    >>> gen = FingerprintGenerator('xxhash', radius=2, n_bits=2048)
    >>> X = gen.transform(['CCO', 'c1ccccc1', 'CC(=O)O'])  # Shape: (3, 2048)
"""
import logging

__version__ = '1.0.0'

from .exceptions import ECFPError, ParseError, GraphContractError, InternalInconsistency
from .graph import MolGraph
from .expander import ECFPExpander, mol_to_features
from .registry import Feature, FeatureRegistry
from .fingerprints import FingerprintGenerator, fold_to_bitvect
from . import utils

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'ECFPError',
    'ParseError',
    'GraphContractError',
    'InternalInconsistency',
    'MolGraph',
    'ECFPExpander',
    'mol_to_features',
    'Feature',
    'FeatureRegistry',
    'FingerprintGenerator',
    'fold_to_bitvect',
    'utils',
]
