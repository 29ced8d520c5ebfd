"""
Tests for the command-line driver.
"""
import io
import logging

from ecfp.cli import main, process_lines
from ecfp.exceptions import InternalInconsistency
from ecfp.expander import ECFPExpander


def test_process_lines_skips_failures(caplog):
    lines = io.StringIO("CCO\n\nC1CC\nc1ccccc1\n")
    out = io.StringIO()
    with caplog.at_level(logging.ERROR, logger='ecfp.cli'):
        n_failed = process_lines(lines, out, ECFPExpander(2), n_bits=64)

    assert n_failed == 1
    rows = out.getvalue().splitlines()
    assert [r.split('\t')[0] for r in rows] == ['CCO', 'c1ccccc1']
    assert all(len(r.split('\t')[1]) == 64 for r in rows)
    assert 'line 3' in caplog.text


def test_process_lines_hex():
    out = io.StringIO()
    process_lines(io.StringIO("CCO\n"), out, ECFPExpander(1), n_bits=64, fmt='hex')
    assert len(out.getvalue().strip().split('\t')[1]) == 16


def test_main_files(tmp_path):
    infile = tmp_path / 'in.smi'
    outfile = tmp_path / 'out.txt'
    infile.write_text("CCO\nC1CC\nCC(=O)O\n")

    assert main([str(infile), '-o', str(outfile), '-n', '32']) == 0
    rows = outfile.read_text().splitlines()
    assert len(rows) == 2

    assert main([str(infile), '-o', str(outfile), '--strict']) == 1


def test_main_bad_arguments(tmp_path):
    infile = tmp_path / 'in.smi'
    infile.write_text("CCO\n")
    outfile = tmp_path / 'out.txt'
    assert main([str(infile), '-o', str(outfile), '--radius', '-1']) == 2
    assert main([str(infile), '-o', str(outfile), '--n-bits', '0']) == 2


class InconsistentOnMethane:
    """Expander stand-in that gives up on single-atom molecules"""

    def __init__(self):
        self._expander = ECFPExpander(2)

    def run(self, graph):
        if graph.num_atoms == 1:
            raise InternalInconsistency(1, 1)
        return self._expander.run(graph)


def test_process_lines_skips_internal_inconsistency(caplog):
    lines = io.StringIO("CCO\nC\nCC(=O)O\n")
    out = io.StringIO()
    with caplog.at_level(logging.ERROR, logger='ecfp.cli'):
        n_failed = process_lines(lines, out, InconsistentOnMethane(), n_bits=64)

    assert n_failed == 1
    rows = out.getvalue().splitlines()
    assert [r.split('\t')[0] for r in rows] == ['CCO', 'CC(=O)O']
    assert 'line 2' in caplog.text
    assert "skipping 'C'" in caplog.text

    expected = io.StringIO()
    process_lines(io.StringIO("CCO\nCC(=O)O\n"), expected, ECFPExpander(2), n_bits=64)
    assert out.getvalue() == expected.getvalue()
