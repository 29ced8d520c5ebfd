"""
Command-line driver: one SMILES per input line → one folded fingerprint per
output line.

    ecfp molecules.smi --radius 2 --n-bits 64
    cat molecules.smi | python -m ecfp --format hex
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .exceptions import InternalInconsistency, ParseError
from .fingerprints import bitvect_to_hex, bitvect_to_string, fold_to_bitvect
from .graph import MolGraph
from .expander import ECFPExpander
from .hashing import HASH_FUNCS

logger = logging.getLogger('ecfp.cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ecfp',
        description="Compute ECFP fingerprints for SMILES, one molecule per line.")
    parser.add_argument('input', nargs='?', type=argparse.FileType('r'), default=sys.stdin,
                        help="SMILES file (default: stdin)")
    parser.add_argument('-o', '--output', type=argparse.FileType('w'), default=sys.stdout,
                        help="output file (default: stdout)")
    parser.add_argument('-r', '--radius', type=int, default=2)
    parser.add_argument('-n', '--n-bits', type=int, default=64)
    parser.add_argument('--hash', dest='hash_func', choices=HASH_FUNCS, default='xxhash')
    parser.add_argument('--format', choices=['bits', 'hex'], default='bits')
    parser.add_argument('--strict', action='store_true',
                        help="exit with status 1 if any line failed")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true')
    verbosity.add_argument('-q', '--quiet', action='store_true')
    return parser


def process_lines(lines: TextIO, out: TextIO, expander: ECFPExpander,
                  n_bits: int, fmt: str = 'bits') -> int:
    """
    Fingerprint every line of ``lines``, writing results to ``out``.

    Returns:
        Number of lines that failed and were skipped
    """
    render = bitvect_to_hex if fmt == 'hex' else bitvect_to_string
    n_failed = 0
    for lineno, line in enumerate(lines, 1):
        smiles = line.strip()
        if not smiles:
            continue
        try:
            features = expander.run(MolGraph.from_smiles(smiles))
        except ParseError as e:
            logger.error("line %d: %s", lineno, e)
            n_failed += 1
            continue
        except InternalInconsistency as e:
            logger.error("line %d: %s; skipping %r", lineno, e, smiles)
            n_failed += 1
            continue
        out.write(f"{smiles}\t{render(fold_to_bitvect(features, n_bits))}\n")
    return n_failed


def _run(args) -> int:
    if args.n_bits <= 0:
        logger.error("--n-bits must be positive, got %d", args.n_bits)
        return 2
    try:
        expander = ECFPExpander(args.radius, args.hash_func)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    n_failed = process_lines(args.input, args.output, expander, args.n_bits, args.format)
    if n_failed:
        logger.warning("%d line(s) skipped", n_failed)
    return 1 if args.strict and n_failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    try:
        return _run(args)
    finally:
        for f in (args.input, args.output):
            if f not in (sys.stdin, sys.stdout):
                f.close()


if __name__ == '__main__':
    sys.exit(main())
