import pytest

from httpkit.fib import fib_for, fib_loop, fib_while, main


@pytest.mark.parametrize("fn", [fib_loop, fib_while, fib_for])
def test_recurrence(fn):
    vals = fn(10)
    assert len(vals) == 8
    assert vals[:2] == [2, 3]
    assert all(vals[i] == vals[i - 1] + vals[i - 2] for i in range(2, len(vals)))


def test_styles_agree():
    assert fib_loop(12) == fib_while(12) == fib_for(12)


def test_small_n():
    assert fib_while(2) == []
    assert fib_for(1) == []
    assert fib_loop(2) == [2]


def test_main_prints(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.count("next val is") == 24