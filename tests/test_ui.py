import pytest
from docopt import DocoptExit
from foldfuse.ui import foldfuse_ui

def test_run_plain(capsys):
    r = foldfuse_ui(['run', '1', '2', '3'])
    captured = capsys.readouterr()
    assert captured.out == "[1, 2, 3]\n"
    assert captured.err == ""
    assert r == 0

def test_run_even_square(capsys):
    r = foldfuse_ui(['run', '--even', '--square', '1', '2', '3', '4', '5'])
    captured = capsys.readouterr()
    assert captured.out == "[4, 16]\n"
    assert r == 0

def test_run_cons_left_reverses(capsys):
    r = foldfuse_ui(['run', '--cons', '--even', '--square', '1', '2', '3', '4', '5'])
    captured = capsys.readouterr()
    assert captured.out == "[16, 4]\n"
    assert r == 0

def test_run_cons_right_keeps_order(capsys):
    r = foldfuse_ui(['run', '--cons', '--right', '--even', '--square', '1', '2', '3', '4', '5'])
    captured = capsys.readouterr()
    assert captured.out == "[4, 16]\n"
    assert r == 0

def test_run_take(capsys):
    r = foldfuse_ui(['run', '--take=2', '1', '2', '3', '4'])
    captured = capsys.readouterr()
    assert captured.out == "[1, 2]\n"
    r = foldfuse_ui(['run', '--right', '--take=2', '1', '2', '3', '4'])
    captured = capsys.readouterr()
    assert captured.out == "[3, 4]\n"
    assert r == 0

def test_run_bad_values(capsys):
    r = foldfuse_ui(['run', 'one'])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Invalid argument")
    assert r == 1
    r = foldfuse_ui(['run', '--take=-1', '1'])
    captured = capsys.readouterr()
    assert captured.err.startswith("Invalid argument")
    assert r == 1

def test_perf(capsys):
    r = foldfuse_ui(['perf', '--size=10', '--number=1', '--quiet'])
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[0].split() == ['case', 'time', 'scale']
    assert any(line.startswith('inc_square_transduce_compose') for line in lines)
    assert any(line.startswith('sum_even_transduce') for line in lines)
    assert r == 0

def test_usage():
    with pytest.raises(DocoptExit):
        foldfuse_ui(['fold'])
