from httpkit.pi import main, not_pi, pi


def test_pi():
    assert pi() == 3.1415926


def test_not_pi():
    assert not_pi() is None


def test_main(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "is_pi:3.1415926, is_unit1: (), is_unit2:()\n"