#!/usr/bin/env python3
"""
Example: ECFP feature sets, folded vectors and a sparse batch matrix.
"""
import numpy as np

from ecfp import FingerprintGenerator, MolGraph, mol_to_features

smiles = ['CCO', 'c1ccccc1', 'CC(=O)O', 'CC(C)O', 'c1ccc(O)cc1', 'not_a_smiles']

print("=" * 60)
print("ECFP feature sets")
print("=" * 60)
for smi in smiles[:3]:
    features = mol_to_features(MolGraph.from_smiles(smi), radius=2)
    print(f"  {smi:<12} {len(features)} features")

gen = FingerprintGenerator('xxhash', radius=2, n_bits=1024)
X = gen.transform(smiles)
X_sparse = gen.transform_sparse(smiles)

print()
print(f"✅ {gen.get_name()}: dense {X.shape}, sparse nnz={X_sparse.nnz}")
print(f"   Bits set per molecule: {np.count_nonzero(X, axis=1).tolist()}")
print(f"   Invalid SMILES row is empty: {X[-1].sum() == 0}")
