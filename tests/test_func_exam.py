from httpkit.func_exam import apply, cube, main, square


def test_apply_matches_direct_call():
    for v in (-3, 0, 2, 7):
        assert apply(v, square) == square(v)
        assert apply(v, cube) == cube(v)


def test_invariants():
    assert square(-5) == square(5)
    assert cube(-4) == -cube(4)
    assert cube(3) == square(3) * 3


def test_main(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "apply square:4\napply cube:8\n"