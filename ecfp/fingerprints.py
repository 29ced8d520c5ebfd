"""
Fingerprint generator: ECFP feature sets folded to fixed-size vectors.
Supports: feature sets, sparse dicts, dense bit vectors, scipy sparse batches
"""
import logging
import numpy as np
from scipy import sparse
from typing import Dict, Iterable, List, Set, Union
from rdkit import Chem

from .exceptions import InternalInconsistency, ParseError
from .expander import ECFPExpander
from .graph import MolGraph
from .hashing import HASH_FUNCS

logger = logging.getLogger(__name__)

MolLike = Union[str, Chem.Mol, MolGraph, None]


def fold_to_bitvect(features: Iterable[int], n_bits: int) -> np.ndarray:
    """
    Fold fingerprint values into a bit vector of length ``n_bits``.

    Each value sets bit ``value % n_bits``. Collisions are not reported.
    """
    if n_bits <= 0:
        raise ValueError(f"n_bits must be positive, got {n_bits}")
    vec = np.zeros(n_bits, dtype=bool)
    for value in features:
        vec[value % n_bits] = True
    return vec


def bitvect_to_string(vec: np.ndarray) -> str:
    return ''.join('1' if b else '0' for b in vec)


def bitvect_to_hex(vec: np.ndarray) -> str:
    return np.packbits(vec.astype(np.uint8)).tobytes().hex()


def as_graph(mol: MolLike):
    """Coerce a SMILES string or RDKit molecule to a MolGraph (None stays None)."""
    if mol is None or isinstance(mol, MolGraph):
        return mol
    if isinstance(mol, str):
        return MolGraph.from_smiles(mol)
    return MolGraph(mol)


class FingerprintGenerator:
    """
    ECFP fingerprint generator.

    Supported hash functions:
    =======================

    1. 'xxhash': XXH3-64
       - Very fast non-cryptographic hash
       - Default

    2. 'blake3': BLAKE3, truncated to 64 bits
       - Cryptographic hash, slower
       - Lowest collision risk between unrelated substructures

    Outputs:
    ========
    - generate_features: raw set of 64-bit fingerprint values
    - generate_sparse: {value: 1} dict
    - generate_basic: folded bit vector of n_bits
    - transform / transform_sparse: batch matrices (numpy / scipy CSR)

    Usage:
    ======
    gen = FingerprintGenerator('xxhash', radius=2, n_bits=2048)
    X = gen.transform(['CCO', 'c1ccccc1'])   # shape (2, 2048)
    """

    def __init__(self, hash_func: str = 'xxhash', radius: int = 2, n_bits: int = 2048):
        """
        Args:
            hash_func: Hash function name
            radius: Fingerprint radius (maximum depth, inclusive)
            n_bits: Number of bits for folding
        """
        if hash_func not in HASH_FUNCS:
            raise ValueError(f"hash_func must be one of {HASH_FUNCS}, got {hash_func}")
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        if n_bits <= 0:
            raise ValueError(f"n_bits must be positive, got {n_bits}")

        self.hash_func = hash_func
        self.radius = radius
        self.n_bits = n_bits
        self._expander = ECFPExpander(radius, hash_func)

    def generate_features(self, mol: MolLike) -> Set[int]:
        """Unfolded fingerprint set. Empty for None."""
        graph = as_graph(mol)
        if graph is None:
            return set()
        return self._expander.run(graph)

    def generate_sparse(self, mol: MolLike) -> Dict[int, int]:
        """Sparse fingerprint (raw value → 1)."""
        return {value: 1 for value in self.generate_features(mol)}

    def fold_sparse_to_dense(self, sparse_dict: Dict[int, int]) -> np.ndarray:
        """Fold sparse fingerprint to a fixed-size binary vector using modulo."""
        return fold_to_bitvect(sparse_dict.keys(), self.n_bits).astype(np.int8)

    def generate_basic(self, mol: MolLike) -> np.ndarray:
        """Generate basic (folded) fingerprint."""
        return self.fold_sparse_to_dense(self.generate_sparse(mol))

    def _safe_features(self, mol: MolLike) -> Set[int]:
        try:
            return self.generate_features(mol)
        except ParseError as e:
            logger.warning("%s; using empty fingerprint", e)
            return set()
        except InternalInconsistency as e:
            logger.error("%s; using empty fingerprint", e)
            return set()

    def transform(self, molecules: List[MolLike]) -> np.ndarray:
        """
        Dense fingerprint matrix for a batch.

        Invalid SMILES, None entries and molecules abandoned on
        InternalInconsistency give all-zero rows.
        """
        X = np.zeros((len(molecules), self.n_bits), dtype=np.int8)
        for r, mol in enumerate(molecules):
            for value in self._safe_features(mol):
                X[r, value % self.n_bits] = 1
        return X

    def transform_sparse(self, molecules: List[MolLike]) -> sparse.csr_matrix:
        """Same as transform, as a scipy CSR matrix."""
        rows, cols = [], []
        for r, mol in enumerate(molecules):
            bits = {value % self.n_bits for value in self._safe_features(mol)}
            rows.extend([r] * len(bits))
            cols.extend(sorted(bits))
        data = np.ones(len(rows), dtype=np.int8)
        return sparse.csr_matrix((data, (rows, cols)),
                                 shape=(len(molecules), self.n_bits))

    def get_name(self) -> str:
        """Get a descriptive name for this generator."""
        return f"{self.hash_func}_ecfp_r{self.radius}"

    def __repr__(self) -> str:
        return (f"FingerprintGenerator(hash={self.hash_func}, "
                f"radius={self.radius}, nbits={self.n_bits})")


__all__ = [
    'fold_to_bitvect',
    'bitvect_to_string',
    'bitvect_to_hex',
    'as_graph',
    'FingerprintGenerator',
]
