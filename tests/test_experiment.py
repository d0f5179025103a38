import io

import Cyclic
from Cyclic import CyclicCoder
from Experiment import RandomSource, Report, RunExperiment, main


class ScriptedSource():
    def __init__(self, bits, ints):
        self.bits = list(bits)
        self.ints = list(ints)

    def next_bit(self):
        return self.bits.pop(0)

    def next_int(self, n):
        i = self.ints.pop(0)
        assert 0 <= i < n
        return i


def test_random_source_seeded():
    a, b = RandomSource(5), RandomSource(5)
    assert [a.next_bit() for _ in range(32)] == [b.next_bit() for _ in range(32)]
    assert all(0 <= a.next_int(10) < 10 for _ in range(100))
    assert {a.next_bit() for _ in range(200)} == {0, 1}


def test_run_fixture():
    coder = CyclicCoder([1, 0, 0, 0, 0, 1, 1])
    result = RunExperiment(coder, 4, ScriptedSource([1, 1, 0, 1], [0]))
    assert result['n'] == 10
    assert result['codeword'] == [1, 1, 0, 1, 0, 1, 0, 1, 1, 1]
    assert result['received'] == [0, 1, 0, 1, 0, 1, 0, 1, 1, 1]
    assert result['found'] == 0
    assert result['corrected'] == result['codeword']
    assert str(result['fx']) == 'x^9 + x^8 + x^6 + x^4 + x^2 + x + 1'

    out = io.StringIO()
    Report(result, 1, out=out)
    text = out.getvalue()
    assert ' Experiment 1 ' in text
    assert 'F(x) bits:      1101010111' in text
    assert 'with error:     0101010111' in text
    assert 'found error index: 0' in text
    assert '[1: 9]' in text


def test_run_default_parameters():
    coder = CyclicCoder()
    rand = RandomSource(0)
    for _ in range(6):
        result = RunExperiment(coder, 42, rand)
        assert result['n'] == 48
        assert result['found'] == result['error_index']
        assert result['corrected'] == result['codeword']


def test_report_uncorrectable():
    coder = CyclicCoder([1, 0, 0, 0, 0, 1, 1])
    result = RunExperiment(coder, 4, ScriptedSource([1, 1, 0, 1], [0]))
    result['corrected'] = None
    out = io.StringIO()
    Report(result, out=out)
    assert 'error syndrome not found in table' in out.getvalue()


def test_main(capsys):
    assert main(['--runs', '2', '--seed', '1']) == 0
    out = capsys.readouterr().out
    assert ' Experiment 2 ' in out
    assert 'p = 6' in out


def test_main_symbolic_verbose(capsys):
    try:
        assert main(['--runs', '1', '--k', '4', '--seed', '3', '--key', 'symbolic', '--verbose']) == 0
    finally:
        Cyclic.VERBOSE = False
    out = capsys.readouterr().out
    assert '---- Cyclic Encode ----' in out
    assert 'x + 1:' in out


def test_main_errors(capsys):
    assert main(['--k', '58']) == 1
    assert 'error:' in capsys.readouterr().err
    assert main(['--px', '1000010']) == 1
    assert 'error:' in capsys.readouterr().err


def test_report_no_error():
    coder = CyclicCoder([1, 0, 0, 0, 0, 1, 1])
    result = RunExperiment(coder, 4, ScriptedSource([1, 1, 0, 1], [0]))
    result['received'] = result['codeword']
    result['corrected'], result['found'] = coder.Decode(result['codeword'], result['table'])
    out = io.StringIO()
    Report(result, out=out)
    text = out.getvalue()
    assert 'info: no error' in text
    assert 'found error index' not in text
