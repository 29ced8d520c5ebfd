"""
Utility functions for ECFP fingerprint generation.
"""

import logging

import numpy as np
from typing import List, Optional

from .exceptions import ParseError
from .fingerprints import MolLike, as_graph
from .graph import MolGraph

logger = logging.getLogger(__name__)


def ensure_graph(mol_or_smiles: MolLike) -> Optional[MolGraph]:
    """
    Coerce input to a MolGraph.

    Args:
        mol_or_smiles: SMILES string, RDKit molecule, MolGraph or None

    Returns:
        MolGraph, or None if the input is None or does not parse
    """
    try:
        return as_graph(mol_or_smiles)
    except ParseError as e:
        logger.warning("%s", e)
        return None


def load_graphs(smiles_list: List[str], verbose: bool = False) -> List[Optional[MolGraph]]:
    """
    Parse a list of SMILES strings into molecule graphs.

    Args:
        smiles_list: List of SMILES strings
        verbose: Print progress

    Returns:
        List of MolGraph objects (None for invalid SMILES)
    """
    graphs = []
    n_invalid = 0

    for i, smi in enumerate(smiles_list):
        graph = ensure_graph(smi)
        graphs.append(graph)

        if graph is None:
            n_invalid += 1

        if verbose and (i + 1) % 1000 == 0:
            print(f"Parsed {i + 1}/{len(smiles_list)} molecules ({n_invalid} invalid)")

    if verbose:
        print(f"✅ Parsed {len(graphs)} molecules ({n_invalid} invalid)")

    return graphs


def batch_generate(generator, molecules: List[MolLike], show_progress: bool = False,
                   chunk_size: int = 1000) -> np.ndarray:
    """
    Folded fingerprints for a batch, computed chunk by chunk.

    Rows for invalid or abandoned molecules are all zero, as in
    FingerprintGenerator.transform.

    Args:
        generator: FingerprintGenerator instance
        molecules: SMILES strings, RDKit molecules or MolGraphs
        show_progress: Show progress bar over chunks (requires tqdm)
        chunk_size: Molecules per transform call

    Returns:
        numpy array of shape (len(molecules), generator.n_bits)
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    starts = range(0, len(molecules), chunk_size)
    if show_progress:
        try:
            from tqdm import tqdm
            starts = tqdm(starts, desc="Generating fingerprints")
        except ImportError:
            logger.warning("tqdm not available, progress bar disabled")

    chunks = [generator.transform(molecules[s:s + chunk_size]) for s in starts]
    if not chunks:
        return np.zeros((0, generator.n_bits), dtype=np.int8)
    return np.vstack(chunks)


__all__ = [
    'ensure_graph',
    'load_graphs',
    'batch_generate',
]
