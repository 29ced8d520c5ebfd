"""
Atom invariants: numbering-independent identifiers for each atom.

Based on the Daylight atomic invariants used by Rogers & Hahn (2010):
heavy-atom neighbour count, valence minus hydrogens, atomic number,
formal charge and total hydrogen count.
"""
from typing import List, Tuple

from .hashing import hash_64


def invariant_tuple(graph, atom_id: int) -> Tuple[int, int, int, int, int]:
    n_hydrogens = graph.hydrogen_count(atom_id)
    return (
        graph.heavy_neighbor_count(atom_id),
        graph.valence_electrons(atom_id) - n_hydrogens,
        graph.atomic_number(atom_id),
        graph.formal_charge(atom_id),
        n_hydrogens,
    )


def atom_invariant(graph, atom_id: int, hash_func: str = 'xxhash') -> int:
    """Hash one atom's invariant tuple to a 64-bit identifier."""
    return hash_64(invariant_tuple(graph, atom_id), hash_func)


def invariant_identifiers(graph, hash_func: str = 'xxhash') -> List[int]:
    """
    Compute the invariant identifier of every atom.

    Args:
        graph: Molecule graph (see MolGraph)
        hash_func: Hash function name

    Returns:
        List of identifiers indexed by atom id. Atoms with identical
        invariant tuples share an identifier.
    """
    return [atom_invariant(graph, i, hash_func) for i in graph.atom_ids()]


__all__ = ['invariant_tuple', 'atom_invariant', 'invariant_identifiers']
