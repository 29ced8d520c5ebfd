"""
Read-only molecule graph backed by RDKit.

The fingerprint core only ever talks to a molecule through the handful of
queries exposed here: atom ids, per-atom element data, neighbours, and bond
orders.
"""
from typing import Iterator, List

from rdkit import Chem

from .exceptions import GraphContractError, ParseError


class MolGraph:
    """
    Query surface over an RDKit molecule.

    Atom ids are RDKit atom indices (dense, 0..num_atoms-1). Hydrogens that
    are graph nodes (``Chem.AddHs``, isotopic ``[2H]``) still take part in the
    expansion, but atom invariants count them as hydrogens, never as heavy
    neighbours.

    Usage:
        graph = MolGraph.from_smiles('CCO')
        for i in graph.atom_ids():
            print(i, graph.atomic_number(i), list(graph.neighbors(i)))
    """

    def __init__(self, mol: Chem.Mol):
        if mol is None:
            raise ValueError("mol must be an RDKit molecule, got None")
        self.mol = mol
        self._table = Chem.GetPeriodicTable()

    @classmethod
    def from_smiles(cls, smiles: str) -> 'MolGraph':
        mol = Chem.MolFromSmiles(smiles)
        if mol is None:
            raise ParseError(smiles)
        return cls(mol)

    @property
    def num_atoms(self) -> int:
        return self.mol.GetNumAtoms()

    def _atom(self, atom_id: int) -> Chem.Atom:
        if not 0 <= atom_id < self.num_atoms:
            raise IndexError(f"atom id {atom_id} out of range for {self.num_atoms} atoms")
        return self.mol.GetAtomWithIdx(atom_id)

    def atom_ids(self) -> List[int]:
        return list(range(self.num_atoms))

    def atomic_number(self, atom_id: int) -> int:
        return self._atom(atom_id).GetAtomicNum()

    def valence_electrons(self, atom_id: int) -> int:
        """Outer-shell electron count of the atom's element."""
        return self._table.GetNOuterElecs(self.atomic_number(atom_id))

    def formal_charge(self, atom_id: int) -> int:
        return self._atom(atom_id).GetFormalCharge()

    def hydrogen_count(self, atom_id: int) -> int:
        """Implicit, explicit and graph-node hydrogens on the atom."""
        return self._atom(atom_id).GetTotalNumHs(includeNeighbors=True)

    def heavy_neighbor_count(self, atom_id: int) -> int:
        return sum(1 for nbr in self._atom(atom_id).GetNeighbors() if nbr.GetAtomicNum() > 1)

    def neighbors(self, atom_id: int) -> Iterator[int]:
        for nbr in self._atom(atom_id).GetNeighbors():
            yield nbr.GetIdx()

    def bond_order(self, a: int, b: int) -> float:
        """Bond order as electrons / 2, e.g. 1.5 for an aromatic bond."""
        self._atom(a)
        self._atom(b)
        bond = self.mol.GetBondBetweenAtoms(a, b)
        if bond is None:
            raise GraphContractError(f"no bond between atoms {a} and {b}")
        return bond.GetBondTypeAsDouble()

    def __len__(self) -> int:
        return self.num_atoms

    def __repr__(self) -> str:
        return f"MolGraph({Chem.MolToSmiles(self.mol)!r}, atoms={self.num_atoms})"


__all__ = ['MolGraph']
